"""
Bingo Server Application Package

Real-time two-player Bingo over Socket.IO: rooms, turn enforcement,
line scoring and state synchronization for players and spectators.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Each app gets its own room registry and services, so separate apps
    (for example one per test) never share rooms.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    from .utils.game_logger import game_logger
    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))
    
    # Initialize extensions
    CORS(app, origins=app.config['CORS_ORIGINS'])
    socketio = SocketIO(
        app,
        cors_allowed_origins=app.config['CORS_ORIGINS'],
        async_mode=app.config.get('SOCKETIO_ASYNC_MODE'),
        logger=False,
        engineio_logger=False
    )
    
    # Wire services for this app instance
    from .services import GameService, LobbyService, RoomRegistry
    from .websocket.broadcaster import SocketIORoomPublisher
    
    registry = RoomRegistry()
    publisher = SocketIORoomPublisher(socketio)
    lobby_service = LobbyService(registry, publisher)
    game_service = GameService(registry, publisher)
    app.extensions['bingo'] = {
        'registry': registry,
        'lobby_service': lobby_service,
        'game_service': game_service
    }
    
    # Register blueprints
    from .controllers.room_controller import room_bp
    app.register_blueprint(room_bp, url_prefix='/api')
    
    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, lobby_service, game_service)
    
    # Store socketio instance for use in other modules
    app.socketio = socketio
    
    return app, socketio
