from kardsbot.main import main

main()
