from consolekit.cli import main

main()
