"""Default channel configuration content."""

DEFAULT_CHANNEL_FILE = "channel.yml"


def get_default_channel_content() -> str:
    """Get the starter channel.yml written by ``castfeed init``."""
    return """# castfeed channel configuration
#
# Mandatory attributes
title: My Podcast
url: https://example.com/podcast/
description: A few words about the podcast

# Optional attributes
# subtitle: A short tagline
# author: Jane Doe
# owner:
#   name: Jane Doe
#   email: jane@example.com
# language: en-us
# copyright: 2026 Jane Doe
# categories: [Technology]
# keywords: [podcast, audio]
# explicit: no

# Relative image URLs are resolved against 'url'
# image_url: artwork.png

# Base URL of the episode files (defaults to 'url')
# enclosures_url: https://cdn.example.com/episodes/

# Template overrides (file path or built-in template name)
# channel_template: templates/channel.rss.j2
# episode_template: templates/episode.rss.j2
"""
