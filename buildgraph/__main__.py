from buildgraph.cli import main

main()
