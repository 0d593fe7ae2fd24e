from lispy.repl import main

main()
