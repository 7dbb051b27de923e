from composer_update.main import main

main()
