import base64

from buildcast.audio import AudioSynthesizer, split_text_into_chunks
from constants import MOCK_AUDIO_URL


def test_short_text_is_one_chunk():
    assert split_text_into_chunks("One. Two! Three?", 100) == ["One. Two. Three."]


def test_sentences_are_packed_up_to_limit():
    assert split_text_into_chunks("One. Two. Three.", 10) == ["One. Two.", "Three."]


def test_long_sentence_is_split_on_words():
    chunks = split_text_into_chunks("alpha beta gamma delta.", 11)
    assert chunks == ["alpha beta", "gamma", "delta."]
    assert all(len(c) <= 11 for c in chunks)


def test_without_key_returns_placeholder():
    result = AudioSynthesizer(api_key="").synthesize("Narrate me.")
    assert result.is_placeholder
    assert result.audio_url == MOCK_AUDIO_URL
    assert result.download_url == MOCK_AUDIO_URL
    assert result.transcript == "Narrate me."


def test_synthesize_returns_data_url(tts_client):
    client = tts_client()
    synth = AudioSynthesizer(api_key="key", voice_id="voice", model_id="model", client=client)
    result = synth.synthesize("A short summary.")

    assert result.audio_bytes == b"abcd"
    assert result.audio_url == "data:audio/mpeg;base64," + base64.b64encode(b"abcd").decode()
    assert result.download_url == result.audio_url
    assert result.transcript == "A short summary."

    call = client.calls[0]
    assert call["voice_id"] == "voice"
    assert call["model_id"] == "model"
    assert call["output_format"] == "mp3_44100_128"
    assert call["voice_settings"].stability == 0.6


def test_long_text_is_sent_in_chunks(tts_client):
    client = tts_client()
    pauses = []
    synth = AudioSynthesizer(api_key="key", max_chars=10, client=client, sleep=pauses.append)
    result = synth.synthesize("One. Two. Three.")

    assert [c["text"] for c in client.calls] == ["One. Two.", "Three."]
    assert pauses == [0.1]
    assert result.audio_bytes == b"abcdabcd"
    assert result.transcript == "One. Two. Three."


def test_provider_error_returns_placeholder(tts_client):
    synth = AudioSynthesizer(api_key="key", client=tts_client(error=RuntimeError("quota")))
    result = synth.synthesize("Some text.")
    assert result.is_placeholder
    assert result.audio_url == MOCK_AUDIO_URL


def test_empty_audio_returns_placeholder(tts_client):
    synth = AudioSynthesizer(api_key="key", client=tts_client(chunks=()))
    assert synth.synthesize("Some text.").is_placeholder


def test_ping(tts_client):
    assert AudioSynthesizer(api_key="key", client=tts_client()).ping()
    assert not AudioSynthesizer(api_key="").ping()
