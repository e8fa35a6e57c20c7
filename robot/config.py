"""
Configuration for Robot webservice accounts.
Handles connection settings and named account profiles stored as JSON.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, List
import json
import logging
import os

from dotenv import load_dotenv


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://robot-ws.your-server.de"


def _parse_bool(value: Optional[str]) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RobotConfig:
    """
    Connection settings for one Robot webservice account.

    Attributes:
        base_url: Webservice URL (e.g., "https://robot-ws.your-server.de")
        username: Webservice user name
        password: Webservice password
        verbose: Log every request and response at DEBUG level
        timeout: Request timeout in seconds (None waits forever)
        verify_ssl: Verify the server certificate
        headers: Extra headers sent with every request
    """
    base_url: str
    username: str
    password: str
    verbose: bool = False
    timeout: Optional[float] = 30
    verify_ssl: bool = True
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url is required")
        if not self.username or not self.password:
            raise ValueError("username and password are required")
        self.base_url = self.base_url.rstrip('/')

    def to_dict(self) -> Dict:
        """Convert config to dictionary for storage."""
        return {
            "base_url": self.base_url,
            "username": self.username,
            "password": self.password,
            "verbose": self.verbose,
            "timeout": self.timeout,
            "verify_ssl": self.verify_ssl,
            "headers": dict(self.headers),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'RobotConfig':
        """Create config from dictionary."""
        return cls(
            base_url=data.get("base_url", DEFAULT_BASE_URL),
            username=data["username"],
            password=data["password"],
            verbose=data.get("verbose", False),
            timeout=data.get("timeout", 30),
            verify_ssl=data.get("verify_ssl", True),
            headers=dict(data.get("headers") or {}),
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'RobotConfig':
        """
        Create config from environment variables.

        A .env file is loaded first (variables already set in the
        environment win). Recognized variables: ROBOT_URL, ROBOT_USER,
        ROBOT_PASSWORD, ROBOT_VERBOSE, ROBOT_TIMEOUT.

        Args:
            dotenv_path: Path of the .env file (default: search from cwd)

        Raises:
            ValueError: if user or password is missing
        """
        load_dotenv(dotenv_path)

        timeout = os.getenv("ROBOT_TIMEOUT")
        return cls(
            base_url=os.getenv("ROBOT_URL", DEFAULT_BASE_URL),
            username=os.getenv("ROBOT_USER", ""),
            password=os.getenv("ROBOT_PASSWORD", ""),
            verbose=_parse_bool(os.getenv("ROBOT_VERBOSE")),
            timeout=float(timeout) if timeout else 30,
        )


class RobotConfigManager:
    """
    Manager for named Robot account profiles.
    Handles the configuration file and in-memory storage.
    """

    def __init__(self, config_file: str = "config/robot_profiles.json"):
        """
        Initialize the configuration manager.

        Args:
            config_file: Path to the JSON configuration file
        """
        self.config_file = config_file
        self.profiles: Dict[str, RobotConfig] = {}
        self.load_config()

    def load_config(self) -> None:
        """Load profiles from file if it exists."""
        if not os.path.exists(self.config_file):
            logger.info(f"Configuration file not found: {self.config_file}")
            return

        with open(self.config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        for name, profile_data in data.get("profiles", {}).items():
            self.profiles[name] = RobotConfig.from_dict(profile_data)
        logger.info(f"Configuration loaded from {self.config_file}")

    def save_config(self) -> None:
        """Save profiles to file."""
        directory = os.path.dirname(self.config_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        data = {
            "profiles": {
                name: profile.to_dict() for name, profile in self.profiles.items()
            }
        }
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"Configuration saved to {self.config_file}")

    def add_profile(self, name: str, config: RobotConfig) -> None:
        """Add or update a profile."""
        self.profiles[name] = config
        self.save_config()

    def remove_profile(self, name: str) -> bool:
        """Remove a profile."""
        if name in self.profiles:
            del self.profiles[name]
            self.save_config()
            return True
        return False

    def get_profile(self, name: str) -> Optional[RobotConfig]:
        """Get a profile by name."""
        return self.profiles.get(name)

    def get_all_profiles(self) -> List[str]:
        """Get the names of all configured profiles."""
        return list(self.profiles.keys())
