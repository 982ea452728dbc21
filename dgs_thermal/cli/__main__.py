from dgs_thermal.cli.main import main

main()
