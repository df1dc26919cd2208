from lyric_finder.cli import main

main()
