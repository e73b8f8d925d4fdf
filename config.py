import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Base configuration class."""
    # SECRET_KEY must be set via environment variable in production
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Payroll preview settings
    TIMEZONE = os.environ.get('TIMEZONE') or 'Asia/Manila'
    CURRENCY_SYMBOL = os.environ.get('CURRENCY_SYMBOL') or '₱'
    # Unset keeps Pag-IBIG uncapped, matching existing payroll records
    PAGIBIG_EMPLOYEE_CAP = os.environ.get('PAGIBIG_EMPLOYEE_CAP') or None

    # Logging
    LOG_TO_STDOUT = os.environ.get('LOG_TO_STDOUT')
    LOG_DIR = os.path.join(basedir, 'logs')

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration."""
        import logging
        from logging import StreamHandler
        from app.payroll.calculator import InvalidInputError, to_decimal

        cap = app.config.get('PAGIBIG_EMPLOYEE_CAP')
        if cap is not None:
            try:
                app.config['PAGIBIG_EMPLOYEE_CAP'] = to_decimal(cap, 'PAGIBIG_EMPLOYEE_CAP')
            except InvalidInputError:
                raise ValueError(f"PAGIBIG_EMPLOYEE_CAP must be a non-negative amount, got {cap!r}") from None

        if not app.debug and not app.testing:
            # Production logging
            if app.config.get('LOG_TO_STDOUT'):
                handler = StreamHandler()
            else:
                if not os.path.exists(app.config['LOG_DIR']):
                    os.mkdir(app.config['LOG_DIR'])
                handler = logging.FileHandler(os.path.join(app.config['LOG_DIR'], 'payroll.log'))
            handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            handler.setLevel(logging.INFO)
            app.logger.addHandler(handler)
            app.logger.setLevel(logging.INFO)
            app.logger.info('Payroll System startup')


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    TIMEZONE = 'Asia/Manila'
    CURRENCY_SYMBOL = '₱'
    PAGIBIG_EMPLOYEE_CAP = None


class ProductionConfig(Config):
    DEBUG = False

    @staticmethod
    def init_app(app):
        """Initialize production configuration with validation."""
        Config.init_app(app)  # Call parent init_app for logging

        if not os.environ.get('SECRET_KEY'):
            raise ValueError("SECRET_KEY environment variable must be set in production!")

        app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
