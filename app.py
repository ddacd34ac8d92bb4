# Nova Eco-Packaging - development server
# Configure through environment variables or a .env file (see novaeco/config.py)

from novaeco import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
