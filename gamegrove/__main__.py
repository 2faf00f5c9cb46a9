from gamegrove.cli import main

main()
