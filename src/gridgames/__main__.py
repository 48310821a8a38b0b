from gridgames.cli import main

main()
