from photofinish.main import app

app()
