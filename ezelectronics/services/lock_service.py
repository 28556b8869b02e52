import uuid
from contextlib import contextmanager
from typing import Iterator

import redis
from redis.exceptions import RedisError
from tenacity import Retrying, stop_after_delay, wait_exponential, retry_if_result

from ezelectronics.exceptions import CartBusyError, StorageFailure
from ezelectronics.utils.retry import redis_retry
from ezelectronics.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS, CART_LOCK_WAIT_SECONDS
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nikt nie wcisnie sie miedzy GET a DEL
#wiec zwalniamy tylko wlasny lock, nawet jesli nasz juz wygasl i ktos inny go wzial


class LockService:
    """
    -lock na koszyk klienta (jeden wielokrokowy command na klienta naraz)
    -zwalnianie locka tylko przez wlasciciela (token)
    -atomowosc przy pomocy lua
    """

    def __init__(
        self,
        client: redis.Redis | None = None,
        url: str | None = None,
        ttl: int = CART_LOCK_TTL_SECONDS,
        wait: float = CART_LOCK_WAIT_SECONDS,
    ):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl
        self.wait = wait

    @staticmethod
    def _key(username: str) -> str:
        return f"cart:{username}:lock"

    @redis_retry()
    def acquire_customer_lock(self, username: str, token: str) -> bool:
        key = self._key(username)
        #SET cart:alice:lock "<token>" NX EX 10
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True, #tylko jesli nie istnieje
                ex=self.ttl, #wygasa sam, lock porzucony przez padniety proces nie blokuje na zawsze
            )
        )

    @redis_retry()
    def release_customer_lock(self, username: str, token: str) -> bool:
        key = self._key(username)
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @contextmanager
    def customer_lock(self, username: str) -> Iterator[str]:
        """
        Trzyma lock klienta przez caly blok. Zajety lock: ponawiamy z backoffem
        az do ``wait`` sekund, potem CartBusyError.
        """
        token = uuid.uuid4().hex

        retrying = Retrying(
            stop=stop_after_delay(self.wait),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
            retry=retry_if_result(lambda acquired: acquired is False),
            retry_error_callback=lambda state: False,
        )

        try:
            acquired = retrying(self.acquire_customer_lock, username, token)
        except RedisError as e:
            logger.error(f"Lock store unavailable while locking cart of {username}: {e}")
            raise StorageFailure(str(e)) from e

        if not acquired:
            logger.warning(f"Cart lock for {username} still held after {self.wait}s")
            raise CartBusyError(username)

        logger.debug(f"Cart lock acquired for {username}")
        try:
            yield token
        finally:
            try:
                self.release_customer_lock(username, token)
            except RedisError as e:
                # lock i tak wygasnie po ttl
                logger.warning(f"Failed to release cart lock for {username}: {e}")
