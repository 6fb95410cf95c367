from tilemax import main

main()
