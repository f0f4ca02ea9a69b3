import pytest

from core.errors import KeyGenerationError
from core.provisioning.keys import KeyProvisioner, parse_public_key
from tests.fakes import GENERATED_KEY, KEYGEN_OUTPUT


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def provisioner(fake_age, memory_fs, sleeps):
    return KeyProvisioner(fake_age, memory_fs, sleep=sleeps.append, grace_seconds=0.5)


def test_parse_public_key_from_keygen_output():
    assert parse_public_key(KEYGEN_OUTPUT) == GENERATED_KEY


def test_parse_public_key_trims_whitespace():
    assert parse_public_key("# public key:   age1abc  \r\n") == "age1abc"


@pytest.mark.parametrize("text", [
    "",
    "AGE-SECRET-KEY-1XYZ\n",
    "# public key:\n",
    "  # public key: age1indented\n",
])
def test_parse_public_key_rejects_missing_marker(text):
    with pytest.raises(KeyGenerationError):
        parse_public_key(text)


def test_generates_key_pair_when_key_file_missing(provisioner, fake_age, memory_fs, memory_config, sleeps):
    memory_fs.mkdir(memory_config.root_dir)

    written = provisioner.ensure_keys(
        memory_config.age_binary_dir, memory_config.pubkeys_file, memory_config.root_dir
    )

    assert written is True
    assert memory_fs.read_text(memory_config.pubkeys_file) == GENERATED_KEY
    assert memory_fs.read_text(memory_config.pubkeys_file).splitlines() == [GENERATED_KEY]
    assert memory_fs.is_file(memory_config.root_dir / "age_private.key")
    assert fake_age.calls == [[
        str(memory_config.age_keygen_executable),
        "-o", str(memory_config.root_dir / "age_private.key"),
    ]]
    assert sleeps == [0.5]


def test_existing_multi_key_file_is_left_untouched(provisioner, fake_age, memory_fs, memory_config):
    content = "age1first\nage1second\nage1first\n"
    memory_fs.mkdir(memory_config.root_dir)
    memory_fs.write_text(memory_config.pubkeys_file, content)

    written = provisioner.ensure_keys(
        memory_config.age_binary_dir, memory_config.pubkeys_file, memory_config.root_dir
    )

    assert written is False
    assert memory_fs.read_text(memory_config.pubkeys_file) == content
    assert fake_age.calls == []


def test_malformed_keygen_output_writes_no_key_file(provisioner, fake_age, memory_fs, memory_config):
    memory_fs.mkdir(memory_config.root_dir)
    fake_age.keygen_output = "AGE-SECRET-KEY-1ONLY\n"

    with pytest.raises(KeyGenerationError):
        provisioner.ensure_keys(
            memory_config.age_binary_dir, memory_config.pubkeys_file, memory_config.root_dir
        )

    assert not memory_fs.exists(memory_config.pubkeys_file)


def test_keygen_that_writes_nothing_is_fatal(provisioner, fake_age, memory_fs, memory_config):
    memory_fs.mkdir(memory_config.root_dir)
    fake_age.keygen_output = None

    with pytest.raises(KeyGenerationError, match="without writing"):
        provisioner.ensure_keys(
            memory_config.age_binary_dir, memory_config.pubkeys_file, memory_config.root_dir
        )


def test_existing_private_key_is_reused_not_overwritten(provisioner, fake_age, memory_fs, memory_config):
    memory_fs.mkdir(memory_config.root_dir)
    private_key = memory_config.root_dir / "age_private.key"
    memory_fs.write_text(private_key, "# public key: age1kept\nAGE-SECRET-KEY-1KEPT\n")

    provisioner.ensure_keys(memory_config.age_binary_dir, memory_config.pubkeys_file, memory_config.root_dir)

    assert fake_age.calls == []
    assert memory_fs.read_text(memory_config.pubkeys_file) == "age1kept"
    assert "AGE-SECRET-KEY-1KEPT" in memory_fs.read_text(private_key)
