"""
Audit logging for EmojiID service events.
Emits one JSON document per event on the ``emojid.audit`` logger.
"""

import logging
import json
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from pathlib import Path
from emojid.core.config import settings

class AuditLogger:
    """Structured logging of generation and parse events"""
    
    def __init__(self, log_dir: Optional[str] = None):
        """Initialize audit logger; events also go to a file when log_dir is set"""
        self.logger = logging.getLogger('emojid.audit')
        self.logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
        
        # Configure handlers if not already configured
        if not self.logger.handlers:
            self._configure_stream_handler()
            if log_dir:
                self.log_dir = Path(log_dir)
                self.log_dir.mkdir(parents=True, exist_ok=True)
                self._configure_file_handler()
    
    def _formatter(self) -> logging.Formatter:
        # JSON formatter for structured logs
        return logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "message": %(message)s}',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    
    def _configure_stream_handler(self):
        """Configure audit event stream handler (stderr)"""
        handler = logging.StreamHandler()
        handler.setFormatter(self._formatter())
        self.logger.addHandler(handler)
    
    def _configure_file_handler(self):
        """Configure audit event file handler"""
        handler = logging.FileHandler(self.log_dir / "id_events.log", encoding="utf-8")
        handler.setFormatter(self._formatter())
        self.logger.addHandler(handler)
    
    def log_event(self, event_type: str, details: Dict[str, Any], severity: str = "INFO"):
        """
        Log an event with structured data
        
        Args:
            event_type: Type of event (e.g., 'id_generated', 'parse_rejected')
            details: Additional event details
            severity: Log severity level
        """
        if not settings.LOG_ID_EVENTS:
            return
        
        event_data = {
            "event_type": event_type,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "severity": severity,
            "details": details,
            "source": "emojid"
        }
        
        self.logger.log(getattr(logging, severity, logging.INFO), json.dumps(event_data))
    
    def log_ids_generated(self, count: int, alphabet_size: int, custom_alphabet: bool):
        """Log a successful generation request"""
        self.log_event(
            event_type="id_generated",
            details={
                "count": count,
                "alphabet_size": alphabet_size,
                "custom_alphabet": custom_alphabet,
            },
        )
    
    def log_parse_rejected(self, error_type: str, message: str, endpoint: str):
        """Log a parse that failed validation"""
        self.log_event(
            event_type="parse_rejected",
            details={
                "error_type": error_type,
                "message": message[:200],
                "endpoint": endpoint,
            },
            severity="WARNING"
        )
    
    def log_entropy_failure(self, endpoint: str, error_details: str):
        """Log a failure to read the secure random source"""
        self.log_event(
            event_type="entropy_failure",
            details={
                "endpoint": endpoint,
                "error": error_details,
            },
            severity="CRITICAL"
        )

# Global audit logger instance
audit_logger = AuditLogger(settings.AUDIT_LOG_DIR)
