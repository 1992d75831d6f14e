from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Catalog'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Also enables the rotating log file

    # Flat-file storage; relative names resolve against DATA_DIR
    DATA_DIR: Path = Path('.')
    MOVIES_FILE: str = 'movies.csv'
    SHOWTIMES_FILE: str = 'showTimes.csv'
    SOLD_TICKETS_FILE: str = 'sold_tickets.csv'
    FILE_ENCODING: str = 'utf-8'

    @field_validator('DATA_DIR', mode='before')
    @classmethod
    def expand_data_dir(cls, v: str | Path) -> Path:
        return Path(v).expanduser()

    def _resolve(self, file_name: str) -> Path:
        path = Path(file_name)
        return path if path.is_absolute() else self.DATA_DIR / path

    @property
    def MOVIES_PATH(self) -> Path:
        return self._resolve(self.MOVIES_FILE)

    @property
    def SHOWTIMES_PATH(self) -> Path:
        return self._resolve(self.SHOWTIMES_FILE)

    @property
    def SOLD_TICKETS_PATH(self) -> Path:
        return self._resolve(self.SOLD_TICKETS_FILE)


settings = Settings()
