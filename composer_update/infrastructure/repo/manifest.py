from pathlib import Path


MANIFEST_FILES = ("composer.json", "composer.lock")


def manifest_exists(composer_dir: Path) -> bool:
    return all((composer_dir / file_name).is_file() for file_name in MANIFEST_FILES)
