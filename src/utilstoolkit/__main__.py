from utilstoolkit.cli import main

main()
