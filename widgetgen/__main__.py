from widgetgen.cli import main

main()
