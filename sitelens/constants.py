"""All magic values live here — no inline literals anywhere else."""

# Gemini
GEMINI_MODEL = "gemini-3-flash-preview"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Encoded image input
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"
DATA_URL_SEPARATOR = ","
DATA_URL_PARAM_SEPARATOR = ";"
DATA_URL_SCHEME_SEPARATOR = ":"
DATA_URL_TEMPLATE = "data:%s;base64,%s"

# Photo analysis
PHOTO_ANALYSIS_PROMPT = (
    "Analyze this construction site photo. Identify the current stage of "
    "construction, list any visible materials, and highlight potential "
    "safety hazards if any. Be concise."
)
MSG_PHOTO_EMPTY = "無法分析圖片"
MSG_PHOTO_FAILED = "分析失敗，請稍後再試。"

# Bilingual translation (Traditional Chinese <-> Vietnamese, interlinear)
TRANSLATION_SYSTEM_INSTRUCTION = (
    "You are a professional translator for a Taiwanese construction company "
    "that employs Vietnamese site workers. You translate project descriptions, "
    "work reports and remarks between Traditional Chinese and Vietnamese, "
    "naturally and without losing technical construction terminology."
)
TRANSLATION_PROMPT_TEMPLATE = (
    "Produce a bilingual version of the project content below.\n"
    "Rules:\n"
    "1. Keep every original line exactly as written.\n"
    "2. Directly beneath each line (or sentence segment), add its translation: "
    "Vietnamese for Chinese lines, Traditional Chinese for Vietnamese lines.\n"
    "3. Keep list markers, numbering and blank lines intact.\n"
    "4. Output only the bilingual content. No preamble, notes or conclusion.\n"
    "5. If the content is already bilingual, do not translate it again; "
    "re-normalize it to the same one-line-then-translation layout.\n"
    "\n"
    'Text: "%s"'
)

# Log messages
MSG_PHOTO_REQUEST = "→ Gemini photo analysis (%s, %d base64 chars)"
MSG_PHOTO_ERROR = "Error analyzing photo"
MSG_PHOTO_MALFORMED = "Rejected malformed image input: %s"
MSG_PHOTO_EMPTY_RESPONSE = "Photo analysis returned no text"
MSG_TRANSLATE_REQUEST = "→ Gemini translation (%d chars)"
MSG_TRANSLATE_ERROR = "Error translating content"
MSG_TRANSLATE_SKIPPED = "Skipping translation of blank or non-text input"
MSG_TRANSLATE_EMPTY_RESPONSE = "Translation returned no text"

# Command line
CLI_PROG = "sitelens"
CLI_DESCRIPTION = "Construction-site AI helpers backed by Gemini."
CMD_ANALYZE = "analyze"
CMD_TRANSLATE = "translate"
STDIN_MARKER = "-"
MSG_BAD_LOG_LEVEL = "LOG_LEVEL must be one of %s, got %r"
MSG_IMAGE_UNREADABLE = "Cannot read image file: %s"
