"""
User-agent sniffing for icon rendering.

This is best-effort client sniffing against a known deny-list, not feature
detection. None of the SVG polyfills were good enough, so browsers known to
lack inline SVG get PNG icons and everyone else (including clients that send
no user agent at all) gets the vector markup.
"""

# Substrings of user agents that can't render inline SVG
NO_SVG_MARKERS = (
    'Android 2',
    'MSIE 6',
    'MSIE 7',
    'MSIE 8',
)


def supports_vector_icons(user_agent):
    if not user_agent:
        return True
    return not any(marker in user_agent for marker in NO_SVG_MARKERS)


def is_iphone(user_agent):
    return bool(user_agent) and 'iPhone' in user_agent
