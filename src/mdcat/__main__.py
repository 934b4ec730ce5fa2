from mdcat.cli import main

main()
