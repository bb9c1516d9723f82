"""Keyword tables for signal scoring and sector/tier classification.

All phrases are lowercase and matched as plain substrings of the scan
buffer. Multi-word phrases only match with exactly this spacing.
"""

CREATIVITY_SIGNALS = (
    # Visual design
    "designer", "graphic design", "visual design", "ui design", "ux design", "ui/ux",
    "web design", "branding", "creative director", "art director", "illustrator",
    # 3D & motion
    "animator", "3d artist", "motion graphics", "vfx artist", "cgi", "visual effects",
    # Architecture & spatial
    "architect", "interior designer", "architectural", "spatial design",
    # Fashion & product
    "fashion designer", "textile designer", "product designer", "industrial designer",
    # Photography & video
    "photographer", "photo editor", "videographer", "video editor", "filmmaker",
    "cinematographer", "director", "post-production", "colorist",
    # Audio & music
    "musician", "music producer", "songwriter", "composer", "sound designer",
    "audio engineer", "voice actor", "voice over", "podcast",
    # Writing & content
    "writer", "copywriter", "content creator", "journalist", "author", "editor",
    "content writer", "creative writer", "screenwriter", "publisher",
    # Marketing & advertising
    "marketing creative", "advertising", "social media", "content strategist",
    # Games & interactive
    "game designer", "game developer", "game artist", "level designer",
    # General creative terms
    "artist", "creative", "creative professional", "creative industry",
)

AI_SIGNALS = (
    "artificial intelligence", "machine learning", "ai", "automation",
    "generative ai", "chatgpt", "midjourney", "dall-e", "stable diffusion",
    "neural network", "algorithm", "deepfake", "llm", "gpt", "claude",
    "runway", "leonardo", "firefly", "copilot", "gemini",
)

JOB_IMPACT_SIGNALS = (
    "job", "employment", "workforce", "replace", "automate", "future of work",
    "displacement", "hiring", "layoff", "skills", "career", "industry",
    "freelance", "gig economy", "contract", "income", "livelihood",
)

URGENCY_SIGNALS = (
    "breaking", "announced", "launches", "releases",
    "new", "first", "major", "significant", "exclusive",
    "just", "today", "yesterday",
)

POLICY_SIGNALS = ("policy", "regulation", "government")

# Sector id -> keywords. Order here is the order of the output tags.
SECTOR_KEYWORDS = {
    "design": (
        "designer", "graphic design", "visual design", "branding",
        "creative director", "art director", "illustrator", "web design",
    ),
    "ux_ui": (
        "ui design", "ux design", "ui/ux", "user experience", "user interface",
        "product designer", "interaction design",
    ),
    "architecture": (
        "architect", "interior designer", "architectural", "spatial design",
        "interior design", "architectural visualization",
    ),
    "fashion": (
        "fashion designer", "textile designer", "fashion", "apparel design",
        "costume designer", "styling",
    ),
    "three_d_motion": (
        "animator", "3d artist", "motion graphics", "vfx artist", "cgi",
        "visual effects", "3d design", "animation",
    ),
    "photography": (
        "photographer", "photo editor", "photoshoot", "camera", "photography",
        "photo retoucher", "photo manipulation",
    ),
    "video_film": (
        "filmmaker", "video editor", "videographer", "director", "cinematographer",
        "post-production", "colorist", "film", "video production",
    ),
    "music_audio": (
        "musician", "music producer", "songwriter", "composer", "sound designer",
        "audio engineer", "music production", "voice actor", "voice over",
        "podcast", "audio production",
    ),
    "writing_content": (
        "writer", "copywriter", "content creator", "journalist", "author",
        "editor", "content writer", "creative writer", "screenwriter",
        "publisher", "editorial", "blogging",
    ),
    "marketing": (
        "marketing creative", "advertising", "social media", "content strategist",
        "brand strategist", "creative strategist", "campaign",
    ),
    "gaming": (
        "game designer", "game developer", "game artist", "level designer",
        "game design", "gaming industry", "video game",
    ),
}

GENERAL_CREATIVE_TERMS = ("creative", "artist", "creative professional", "creative industry")

# Career impact tiers, evaluated high -> medium -> low
CAREER_IMPACT_TIERS = (
    ("high", ("replace", "automate", "eliminate", "reduce workforce", "layoffs", "obsolete")),
    ("medium", ("transform", "change", "adapt", "reskill", "evolve", "shift")),
    ("low", ("supplement", "assist", "enhance", "support", "augment", "help")),
)

# Intelligence category triggers, evaluated in order
INTELLIGENCE_CATEGORY_TRIGGERS = (
    ("Corporate Strategy", ("earnings", "sec filing", "quarterly")),
    ("Executive Signal", ("ceo", "executive", "leadership")),
    ("Career Impact", ("skills", "jobs", "career")),
    ("Tool Update", ("tool", "feature", "update")),
)

KNOWN_COMPANIES = (
    # AI leaders
    "OpenAI", "Anthropic", "Google", "Microsoft", "Meta", "Apple", "Nvidia",
    # AI creative tools
    "Midjourney", "Stability AI", "Runway", "Pika", "Leonardo AI", "Ideogram",
    "Eleven Labs", "ElevenLabs", "Suno", "Udio", "Perplexity",
    # Creative software
    "Adobe", "Canva", "Figma", "Sketch", "Autodesk", "Affinity", "DaVinci Resolve",
    # Game / 3D
    "Unity", "Epic Games", "Unreal Engine",
    # Content platforms
    "Spotify", "Netflix", "YouTube", "TikTok", "Instagram", "Vimeo", "Substack",
    # Creative marketplaces
    "Behance", "Dribbble", "Shutterstock", "Getty Images", "Unsplash",
    "Etsy", "Patreon", "Fiverr", "Upwork",
)

ENTITY_STOPLIST = frozenset({
    "The", "This", "That", "These", "Those", "Many", "Some", "Most",
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
})
