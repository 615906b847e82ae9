from portfolio.main import main

main()
