from modmake.cli import main

main()
