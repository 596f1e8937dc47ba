from unicafe_menu.cli import run

run()
