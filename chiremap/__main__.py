from chiremap.cli import app

app(prog_name="chiremap")
