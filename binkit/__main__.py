from binkit.cli import main

main()
