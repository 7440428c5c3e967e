from colprint.cli import main

main(prog_name="colprint")
