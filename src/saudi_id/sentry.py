import typing as t

import sentry_sdk

from saudi_id.config import SaudiIdSettings


class SentrySettings(SaudiIdSettings):
    environment: t.Optional[str] = "dev"
    commit_tag: str = "dev"
    sentry_dsn: t.Optional[str] = None


sentry_settings = SentrySettings()


def init(ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> None:
    """
    Initialize sentry if `SAUDI_ID_SENTRY_DSN` is set; should be done as soon as possible in the program.

    :param ignore_exceptions: Exception types that are never reported, eg. rejected user input.
    """
    if not sentry_settings.sentry_dsn:
        return

    def sentry_before_send(event: t.Any, hint: t.Any) -> t.Any:
        if "exc_info" in hint:
            _, exc_value, _ = hint["exc_info"]
            if isinstance(exc_value, tuple(ignore_exceptions)):
                return None

        return event

    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.environment,
        release=sentry_settings.commit_tag,
        traces_sample_rate=0,
        before_send=sentry_before_send,
    )
