from golazo.cli import main

main()
