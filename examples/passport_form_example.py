"""Minimal example: fill a conditional identification form and build its tree."""

import json

from form_tree import FormRecord


def main() -> None:
    """Select passport, fill its fields, then switch to a driving licence."""
    record = FormRecord()
    record["identification_type"] = {"selection": "identification_info_for_passport1"}
    record[("identification_type", "identification_info_for_passport1", "id_for_passport")] = {"content": "Q123456789"}
    record["identification_type>identification_info_for_passport1>date_issued_for_passport"] = {
        "content": "2024-05-31"
    }
    print(f"{record=}")
    print(json.dumps([node.to_dict() for node in record.build()], indent=2))

    record["identification_type"] = {"selection": "driving_licence"}
    removed = record.discard("identification_type>identification_info_for_passport1")
    record["identification_type>driving_licence>licence_number"] = {"content": "DL-0042"}
    print("removed stale entries:", removed)
    print(json.dumps([node.to_dict() for node in record.build()], indent=2))


if __name__ == "__main__":
    main()
