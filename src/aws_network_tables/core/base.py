"""Session and client handling shared by everything that talks to AWS"""

import threading
from typing import Optional

import boto3
from botocore.config import Config

DEFAULT_REGION = "us-east-1"


class BaseClient:
    """Owns a boto3 session and hands out per-region clients.

    boto3 sessions are not safe to create clients from concurrently, so
    client creation is serialised and the result reused per (service, region).
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        session: Optional[boto3.Session] = None,
        max_attempts: int = 5,
    ):
        self.profile = profile
        if session is None:
            session = (
                boto3.Session(profile_name=profile) if profile else boto3.Session()
            )
        self.session = session
        self._config = Config(retries={"max_attempts": max_attempts, "mode": "standard"})
        self._clients: dict[tuple[str, str], object] = {}
        self._client_lock = threading.Lock()

    @property
    def default_region(self) -> str:
        return self.session.region_name or DEFAULT_REGION

    def client(self, service: str, region_name: Optional[str] = None):
        region = region_name or self.default_region
        key = (service, region)
        with self._client_lock:
            if key not in self._clients:
                self._clients[key] = self.session.client(
                    service, region_name=region, config=self._config
                )
            return self._clients[key]
