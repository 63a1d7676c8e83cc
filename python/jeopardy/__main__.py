from jeopardy.main import app

app()
