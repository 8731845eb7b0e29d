from sitekeeper.cli import main

main()
