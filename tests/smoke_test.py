import json
import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
from app.ccb import envelope_to_json, parse_individual_search

SAMPLES = ROOT / 'tests' / 'smoke_responses'

def run_one(name: str):
    payload = (SAMPLES / name).read_bytes()
    result = parse_individual_search(payload)
    assert result.success, f'Could not parse {name}: {result.error}'
    out = json.loads(envelope_to_json(result.unwrap()))
    assert out['response']['service'] == 'individual_search', 'Missing response envelope'
    individuals = out['response']['individuals']
    person = individuals.get('individual', {})
    # Sequences, when present, must be lists of records
    for key in ('addresses', 'phones'):
        if key in person:
            assert isinstance(person[key], list), f'{key} must be a list'
    # Nothing empty leaks into the output
    assert '""' not in json.dumps(out), 'Empty values must be elided'
    print(f"OK: {name} -> {individuals.get('count')} individual(s)")

if __name__ == '__main__':
    for fname in ['jane_doe.xml', 'single_address.xml', 'no_match.xml']:
        run_one(fname)
    print('Smoke tests passed.')
