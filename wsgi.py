"""
WSGI entry point for Docker Cleaner
Use this with production WSGI servers like Gunicorn
"""
from docker_cleaner import create_app
from docker_cleaner.config import DevelopmentConfig, ProductionConfig

# WSGI application
application = create_app(ProductionConfig)


def main() -> None:
    # For development/testing only
    # In production, use: gunicorn -c gunicorn.conf.py wsgi:application
    app = create_app(DevelopmentConfig)
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=False)


if __name__ == '__main__':
    main()
