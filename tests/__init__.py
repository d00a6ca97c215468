"""Test package for refcheck

Shared test utilities.
"""


def make_entry(hash: str, path: str, soft: bool = False, deleted: bool = False,
               table: str = "tt_content", uid: int = 1, field: str = "image"):
    """Build a ReferenceEntry with sensible defaults."""
    from value_objects import ReferenceEntry

    return ReferenceEntry(
        hash=hash,
        source_table=table,
        source_record_id=uid,
        source_field=field,
        target_path=path,
        softref_key="images" if soft else None,
        is_deleted_record=deleted,
    )
