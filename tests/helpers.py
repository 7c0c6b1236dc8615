"""Shared transcripts for the test suite."""

QUALIFYING_ANSWER = (
    "Hello, my name is Anna and I am really happy to apply for this apartment. "
    "I have a stable job as a nurse at the city hospital and I love my work. "
    "I am looking for a quiet place where I can stay long-term with my partner. "
    "We are both friendly, tidy and responsible people. "
    "We would be excited to make this lovely flat our new home."
)

QUALIFYING_ANSWER_WITH_SWEARING = QUALIFYING_ANSWER + " I really want this damn apartment."

NEGATIVE_ANSWER = "I hate this terrible awful situation and I am angry."

WORST_ANSWER = "shit, awful"


def stub_transcriber(text):
    def transcribe(media_bytes, media_type):
        return text

    return transcribe
