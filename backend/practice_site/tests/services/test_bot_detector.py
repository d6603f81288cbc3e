import pytest

from practice_site.services.bot_detector import detected_bot_name, is_social_media_bot


@pytest.mark.parametrize("user_agent", [
    "facebookexternalhit/1.1",
    "WhatsApp/2.23.20.0",
    "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)",
    "TWITTERBOT/1.0",
    "Slackbot-LinkExpanding 1.0 (+https://api.slack.com/robots)",
])
def test_known_crawlers_are_detected(user_agent):
    assert is_social_media_bot(user_agent) is True


@pytest.mark.parametrize("user_agent", [
    "",
    None,
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 Safari/604.1",
])
def test_regular_browsers_are_not_bots(user_agent):
    assert is_social_media_bot(user_agent) is False


def test_detected_bot_name_reports_list_entry():
    assert detected_bot_name("mozilla linkedinbot/1.0") == "LinkedInBot"
    assert detected_bot_name("curl/8.0") is None
