from app.services.providers.protocols.password_encoder import IPasswordEncoder
from app.settings.app import AppSettings
import bcrypt

# bcrypt ignores (newer releases reject) input past 72 bytes
BCRYPT_MAX_BYTES = 72


class BcryptPasswordEncoder(IPasswordEncoder):
    def __init__(self, settings: AppSettings) -> None:
        self.rounds = settings.bcrypt_rounds

    def _encode(self, password: str) -> bytes:
        return password.encode()[:BCRYPT_MAX_BYTES]

    def hash_password(self, password: str) -> str:
        return bcrypt.hashpw(self._encode(password), bcrypt.gensalt(self.rounds)).decode()

    def verify(self, password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), hashed_password.encode())
        except ValueError:
            # malformed hash in the database
            return False
