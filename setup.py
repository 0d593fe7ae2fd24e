# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A small tree-walking Lisp interpreter",
    python_requires=">=3.10",
    packages=find_packages(include=["lispy", "lispy.*"]),
    package_data={"lispy": ["prelude/*.lsp"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy = lispy.repl:main"],
    },
    zip_safe=False,
)
