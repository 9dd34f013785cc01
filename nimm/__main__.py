from nimm.cli import main

main()
