from dbclients.cli import main

main()
