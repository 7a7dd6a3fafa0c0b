from carbonyl_install.cli import main

main()
