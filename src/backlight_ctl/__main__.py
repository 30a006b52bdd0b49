from backlight_ctl.cli import main

main()
