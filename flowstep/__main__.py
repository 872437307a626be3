from flowstep.cli import main

main()
