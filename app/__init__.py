# app/__init__.py

from flask import Flask, jsonify
from config import config


def create_app(config_name='default'):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config[config_name])

    # Initialize app-specific configuration (logging, etc.)
    config[config_name].init_app(app)

    # --- Register Blueprints ---
    from .payroll import bp as payroll_bp
    app.register_blueprint(payroll_bp)

    # --- Register Template Filters for Currency ---
    from .payroll.formatting import format_peso

    @app.template_filter('peso')
    def peso_filter(amount):
        """Format an amount as pesos, e.g. {{ payslip.net_pay|peso }}."""
        return format_peso(amount, symbol=app.config.get('CURRENCY_SYMBOL', '₱'))

    # --- Register Error Handlers ---
    from .payroll.calculator import InvalidInputError

    @app.errorhandler(InvalidInputError)
    def invalid_input_error(error):
        app.logger.warning('Rejected payroll input: %s', error)
        return jsonify({'error': 'invalid_input', 'message': str(error)}), 400

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'error': 'not_found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'internal_error'}), 500

    return app
