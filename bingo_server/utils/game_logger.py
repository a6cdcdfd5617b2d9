"""
Game Logger Module for the Bingo Server

This module provides structured logging for client actions, server responses,
and game events across both the Socket.IO and HTTP surfaces.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from .helpers import get_connection_identity


class GameLogger:
    """
    Centralized logging system for the Bingo server.

    Features:
    - Client action tracking with sid/IP identification
    - Server response logging
    - Game event logging (numbers called, wins, restarts, room lifecycle)
    - JSON structured logs for easy parsing
    """

    def __init__(self, name: str = 'bingo_game'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

    def configure(self, log_dir: Optional[str] = "logs", level: str = "INFO") -> logging.Logger:
        """
        Attach handlers to the game logger.

        Args:
            log_dir: Directory for the dated log file; falsy disables the file handler
            level: Level name for the file handler
        """
        logger = self.logger
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers when several apps are created in one process
        if logger.handlers:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)

            # Create log file with date
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logger.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)
        else:
            self.log_dir = None

        return logger

    def _create_log_entry(self,
                         event_type: str,
                         action: str,
                         user_info: Dict[str, Any],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                       request,
                       action: str,
                       room_id: Optional[str] = None,
                       **kwargs):
        """
        Log client actions with full context.

        Args:
            request: Flask request object (Socket.IO handlers expose one too)
            action: Type of action (e.g., 'create_room', 'select_number')
            room_id: Room identifier if applicable
            **kwargs: Additional details to log
        """
        user_info = get_connection_identity(request)

        details = {
            'room_id': room_id,
            'transport': 'socketio' if user_info.get('sid') else 'http',
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, user_info, details)
        self.logger.info(log_message)

    def log_server_response(self,
                           request,
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           room_id: Optional[str] = None,
                           **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            room_id: Room identifier if applicable
            **kwargs: Additional details to log
        """
        user_info = get_connection_identity(request)

        details = {
            'room_id': room_id,
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self,
                      room_id: Optional[str],
                      event: str,
                      sid: Optional[str] = None,
                      **kwargs):
        """
        Log room-specific events (numbers called, wins, restarts, etc.).

        Args:
            room_id: Room identifier
            event: Type of game event (e.g., 'number_selected', 'game_finished')
            sid: Connection that caused the event, if any
            **kwargs: Additional game details
        """
        user_info = {'user_ip': None, 'sid': sid}

        details = {
            'room_id': room_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                 request,
                 error: Exception,
                 action: str,
                 room_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
            room_id: Room identifier if applicable
        """
        user_info = get_connection_identity(request)

        details = {
            'room_id': room_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, user_info, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep response logs small: boards and marks are summarized."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'turn': state.get('turn'),
                'letters_p1': state.get('lettersP1'),
                'letters_p2': state.get('lettersP2'),
                'finished': state.get('finished'),
                'winner': state.get('winner'),
                'players': state.get('players')
            }

        return sanitized


# Global logger instance
game_logger = GameLogger()
