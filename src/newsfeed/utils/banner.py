"""Banner generation for application."""

import platform
import sys
from datetime import UTC, datetime

from pyfiglet import figlet_format

from newsfeed.config.config import Settings


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Generate and optionally print a banner with server name and settings.

    Args:
        settings: Application configuration settings
        silent: If True, suppress console output and return banner as string

    Returns:
        The complete banner as a string
    """
    lines: list[str] = []

    banner = figlet_format("NEWSFEED", font="slant")
    lines.extend([
        "\033[1;36m" + banner + "\033[0m",
        f"\033[1;33m📰 NEWSFEED Service v{settings.version}\033[0m",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    env_color = "\033[1;31m" if settings.app_env == "production" else "\033[1;32m"
    lines.extend([
        f"🌍 Environment: {env_color}{settings.app_env}\033[0m",
        f"🔌 API: http://{settings.host_binding}:{settings.port}/posts",
        f"📋 Docs: http://localhost:{settings.port}/docs",
    ])

    lines.extend([
        "\n\033[1;33m💾 Database Configuration\033[0m",
        f"  • Engine: {settings.db_url.split('://')[0]}",
        f"  • Clear on Restart: {'✅' if settings.clear_db_on_restart else '❌'}",
        f"  • Seed on Start: {'✅' if settings.seed_db_on_start else '❌'}",
    ])

    lines.extend([
        "\n\033[1;33m📄 Listing Configuration\033[0m",
        f"  • Posts per Page: {settings.posts_per_page}",
        f"  • Query Timeout: {settings.query_timeout}s",
    ])

    lines.extend([
        "\n\033[1;33m📝 Logging Configuration\033[0m",
        f"  • Log Level: {settings.log_level}",
        f"  • Log Path: {settings.log_path if settings.app_env == 'development' else 'stderr'}",  # noqa: E501
    ])

    lines.extend([
        "\n\033[1;33m⚙️ System Information\033[0m",
        f"  • OS: {platform.system()} {platform.release()}",
        f"  • Python: {sys.version.split()[0]}",
        f"  • Auto Reload: {'✅' if settings.reload else '❌'}",
        f"  • Started at: {datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')} UTC",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    banner_text = "\n".join(lines)
    if not silent:
        print(banner_text)  # noqa: T201
    return banner_text
