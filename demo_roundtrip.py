#!/usr/bin/env python3
"""
Demo: Keep boolean type through JSON and YAML round-trips.

Native bools come back from json/yaml as plain True/False; the adapters
hand back the canonical typeserial singletons instead.
"""

import typeserial
from typeserial.adapters import dump_json, dump_yaml, load_json, load_yaml


def main():
    record = {
        "name": "sensor-7",
        "enabled": typeserial.true(),
        "calibrated": typeserial.false(),
        "count": 1,
    }

    print("=" * 70)
    print("BOOLEAN ROUND-TRIP DEMO")
    print("=" * 70)
    print(f"Shared type name: {typeserial.shared_type_name()}")
    print(f"Claimed:          {typeserial.negotiation.installed}")
    print(f"Left alone:       {typeserial.negotiation.skipped}")

    for label, dump, load in (("JSON", dump_json, load_json), ("YAML", dump_yaml, load_yaml)):
        print(f"\n{label}:")
        print("-" * 70)
        text = dump(record)
        print(text)
        restored = load(text)
        for key, value in sorted(restored.items()):
            kind = "boolean" if typeserial.is_bool(value) else type(value).__name__
            print(f"  {key:<12} {value!r:<20} {kind}")

    print("=" * 70)


if __name__ == "__main__":
    main()
