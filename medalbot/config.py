import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Bot configuration settings"""

    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    DISCORD_GUILD_ID = int(os.getenv('DISCORD_GUILD_ID', 0))
    DISCORD_GUILD_IDS = os.getenv('DISCORD_GUILD_IDS', '')  # Comma-separated for multi-guild support

    # Database settings
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///medalbot.db')

    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Logging settings
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'True').lower() == 'true'

    # OpenDota settings
    OPENDOTA_API_URL = os.getenv('OPENDOTA_API_URL', 'https://api.opendota.com/api/')

    # Command settings
    STEAMID_COOLDOWN_SECONDS = 1.0

    @classmethod
    def get_guild_ids(cls):
        """Get list of guild IDs for command syncing"""
        if cls.DISCORD_GUILD_IDS:
            # Multi-guild support: comma-separated IDs
            try:
                return [int(guild_id.strip()) for guild_id in cls.DISCORD_GUILD_IDS.split(',') if guild_id.strip()]
            except ValueError:
                raise ValueError("DISCORD_GUILD_IDS must be comma-separated integers")
        elif cls.DISCORD_GUILD_ID:
            # Single guild support
            return [cls.DISCORD_GUILD_ID]
        else:
            # Global sync
            return []

    @classmethod
    def get_api_base_url(cls) -> str:
        """OpenDota base URL, always with a trailing slash so resource paths can be appended"""
        url = cls.OPENDOTA_API_URL or 'https://api.opendota.com/api/'
        return url if url.endswith('/') else f"{url}/"

    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not cls.OPENDOTA_API_URL:
            raise ValueError("OPENDOTA_API_URL must not be empty")
        # Fails fast on a malformed DISCORD_GUILD_IDS instead of during command sync
        cls.get_guild_ids()
