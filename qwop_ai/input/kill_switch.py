"""
Kill Switch: emergency stop on a global hotkey
Listens for the configured key (F8 by default) on a background thread and
raises the session's stop flag; playback notices it at the next note
"""
import logging
from typing import Callable, Optional

from qwop_ai.config import config

logger = logging.getLogger(__name__)

class KillSwitch:
    """
    Global hotkey listener that calls kill_callback once when pressed
    """
    
    def __init__(self, kill_callback: Callable[[], None], hotkey: Optional[str] = None):
        """
        Args:
            kill_callback: Function to call when the kill button is pressed
            hotkey: Key to use as kill button (default: config.KILL_BUTTON)
        """
        self.kill_callback = kill_callback
        self.hotkey = (hotkey or config.KILL_BUTTON).lower()
        self.killed = False
        self.listener = None
        self.running = False
    
    def _key_name(self, key) -> Optional[str]:
        if getattr(key, 'name', None):
            return key.name.lower()
        if getattr(key, 'char', None):
            return key.char.lower()
        return None
    
    def _on_press(self, key) -> None:
        if self._key_name(key) == self.hotkey:
            logger.info(f"Kill switch detected: {self.hotkey.upper()}")
            self._trigger_kill()
    
    def _trigger_kill(self) -> None:
        """Trigger kill sequence"""
        if self.killed:
            return
        self.killed = True
        logger.critical(f"KILL SWITCH ACTIVATED - {self.hotkey.upper()} pressed, stopping")
        try:
            self.kill_callback()
        except Exception as e:
            logger.error(f"Kill callback error: {e}", exc_info=True)
    
    def start(self) -> None:
        """Start listening for the hotkey"""
        if self.running:
            logger.warning("Kill switch already running")
            return
        # Imported here: pynput needs a display at import time
        from pynput import keyboard
        
        self.listener = keyboard.Listener(on_press=self._on_press)
        self.listener.daemon = True
        self.listener.start()
        self.running = True
        logger.info(f"Kill switch active - Press {self.hotkey.upper()} to stop")
    
    def stop(self) -> None:
        """Stop kill switch listener"""
        self.running = False
        if self.listener:
            self.listener.stop()
            self.listener = None
        logger.info("Kill switch stopped")
    
    def is_killed(self) -> bool:
        return self.killed
    
