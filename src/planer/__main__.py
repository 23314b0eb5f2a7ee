from planer.cli.main import main

main()
