"""
Bingo Game Server - Main Entry Point

This is the main entry point for the Bingo game server.
It builds the Flask-SocketIO application and starts serving.
"""

import os

from bingo_server import create_app
from bingo_server.config import config
from bingo_server.utils.game_logger import game_logger


def main():
    """Main function to build the application and start the server."""
    config_class = config.get(os.getenv('FLASK_ENV', 'default'), config['default'])
    try:
        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")
        
        # Log server startup
        game_logger.logger.info("Bingo Server Starting")
        
        host = app.config['HOST']
        port = app.config['PORT']
        print(f"\nStarting Bingo Game Server on {host}:{port}")
        print(f"Debug mode: {app.config['DEBUG']}")
        print("=" * 50)
        
        # Start the server
        socketio.run(app, host=host, port=port, debug=app.config['DEBUG'], allow_unsafe_werkzeug=True)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Bingo Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
