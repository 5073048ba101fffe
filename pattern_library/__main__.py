from pattern_library.cli import main

main()
