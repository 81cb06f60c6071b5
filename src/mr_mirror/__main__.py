from mr_mirror.main import main

main()
