from wordweave import main

main()
