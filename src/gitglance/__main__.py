from gitglance.cli import main

main()
