from gb import main

main()
