from codetrack.cli import main

main()
