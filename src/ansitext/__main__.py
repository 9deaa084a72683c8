from ansitext.cli import app

app(prog_name="ansitext")
