#setup: pip install -e .
#setup: flask --app investment_calc.wsgi run --port 5000 --debug

from investment_calc.app import create_app
from investment_calc.config import settings

app = create_app(settings)


if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
