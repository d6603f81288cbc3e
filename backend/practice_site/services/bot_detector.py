SOCIAL_MEDIA_BOTS = (
    "facebookexternalhit",
    "Facebot",
    "Twitterbot",
    "LinkedInBot",
    "WhatsApp",
    "TelegramBot",
    "SkypeUriPreview",
    "Applebot",
    "Google-StructuredDataTestingTool",
    "FacebookBot",
    "SlackBot",
    "DiscordBot",
    "facebookcatalog",
    "facebookplatform",
    "vkShare",
    "Googlebot",
)

_LOWERED_BOTS = tuple(bot.lower() for bot in SOCIAL_MEDIA_BOTS)


def is_social_media_bot(user_agent):
    """Link-preview crawlers that do not run JavaScript."""
    if not user_agent:
        return False

    agent = user_agent.lower()
    return any(bot in agent for bot in _LOWERED_BOTS)


def detected_bot_name(user_agent):
    if not user_agent:
        return None

    agent = user_agent.lower()
    for bot, lowered in zip(SOCIAL_MEDIA_BOTS, _LOWERED_BOTS):
        if lowered in agent:
            return bot
    return None
