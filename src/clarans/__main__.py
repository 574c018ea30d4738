from clarans.cli.main import main

main()
