"""Tests for container wiring."""

import asyncio

from daily_diet.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.meal_service is not None
    assert container.user_service is not None
    asyncio.run(container.close_resources())


def test_session_cookie_lifetime_is_seven_days(settings) -> None:
    assert settings.session_cookie_name == "sessionId"
    assert settings.session_cookie_max_age == 7 * 24 * 60 * 60
