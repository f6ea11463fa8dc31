import os
import subprocess

from sqlalchemy.engine import make_url

from .i18n import LANGUAGES

_banner_shown = False

BANNER = r"""
                   _       _                         _
 _ __   ___   ___ | |     | |__   ___   __ _ _ __ __| |___
| '_ \ / _ \ / _ \| |_____| '_ \ / _ \ / _` | '__/ _` / __|
| |_) | (_) | (_) | |_____| |_) | (_) | (_| | | | (_| \__ \
| .__/ \___/ \___/|_|     |_.__/ \___/ \__,_|_|  \__,_|___/
|_|
"""

def get_version():
    """Short git hash, preferring GIT_HASH baked in at image build time"""
    baked = os.environ.get('GIT_HASH')
    if baked:
        return baked[:8]
    try:
        return subprocess.check_output(['git', 'rev-parse', '--short=8', 'HEAD'],
                                       stderr=subprocess.DEVNULL).decode().strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return 'unknown'

def describe_database(uri):
    """Backend and location of the database, without credentials"""
    url = make_url(uri)
    if url.get_backend_name() == 'sqlite':
        return f"sqlite ({url.database or 'memory'})"
    host = url.host or 'localhost'
    port = f":{url.port}" if url.port else ''
    return f"{url.get_backend_name()} ({host}{port}/{url.database})"

def print_startup_banner(app):
    """Print what this instance is about to serve, once per process"""
    global _banner_shown

    if _banner_shown:
        return
    _banner_shown = True

    print("\033[96m" + BANNER + "\033[0m")
    print("\033[94m" + "=" * 70 + "\033[0m")
    print(f"   Version:    {get_version()}")
    print(f"   Database:   {describe_database(app.config['SQLALCHEMY_DATABASE_URI'])}")
    print(f"   Join links: {app.config['BASE_URL']}/join?token=...")
    print(f"   Languages:  {', '.join(LANGUAGES)}")
    print("\033[94m" + "=" * 70 + "\033[0m")
    print()
