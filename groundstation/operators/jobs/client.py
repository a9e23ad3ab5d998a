import asyncio
import json
import logging

import aiohttp
from yarl import URL

from groundstation.base.config import ApiClientConfig
from groundstation.base.errors import ConfigurationError, HttpError
from groundstation.base.job import ApiResponse, JobRequest
from groundstation.common.utils import CustomJSONEncoder

logger = logging.getLogger(__name__)


class JobsClient:
    """Submits tracking jobs to the ground station API. One POST per job, never retried."""

    def __init__(self, config: ApiClientConfig = None):
        if config is None:
            config = ApiClientConfig.from_env()
        try:
            url = URL(config.base_url)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid API base URL {config.base_url!r}: {e}") from e
        if not url.is_absolute() or url.scheme not in ("http", "https"):
            raise ConfigurationError(f"API base URL must be an absolute http(s) URL, got {config.base_url!r}")
        self.config = config
        self.session: aiohttp.ClientSession = None

    async def start(self):
        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
        self.session = aiohttp.ClientSession(timeout=timeout)

    async def stop(self):
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> "JobsClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.stop()

    async def add_job(self, job: JobRequest) -> ApiResponse:
        if self.session is None:
            raise ConfigurationError("JobsClient.start() must be called before submitting")
        url = self.config.jobs_url
        body = json.dumps(job.to_dict(), cls=CustomJSONEncoder)
        headers = {"Content-Type": "application/json"}
        logger.info(f"Submitting job to: {url}")

        try:
            async with self.session.post(url, data=body, headers=headers) as response:
                raw = await response.read()
                charset = response.charset or "utf-8"
                if not 200 <= response.status < 300:
                    text = raw.decode("utf-8", errors="replace")
                    raise HttpError(response.reason or "Request rejected", status=response.status, url=url, body=text)
        except aiohttp.ClientError as e:
            raise HttpError(f"Error connecting to {url}: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            raise HttpError(f"Timed out after {self.config.timeout_seconds}s waiting for {url}", url=url) from e

        try:
            data = json.loads(raw.decode(charset))
        except (UnicodeDecodeError, LookupError) as e:
            raise HttpError(f"Failed to decode response body as {charset}: {e}", status=response.status, url=url) from e
        except json.JSONDecodeError as e:
            raise HttpError(f"Failed to decode JSON from the response: {e}", status=response.status, url=url) from e
        api_response = ApiResponse.from_dict(data)
        logger.info(f"Job accepted with status {api_response.status}")
        return api_response
