from rn_scaffolder.cli import main

main()
