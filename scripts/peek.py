import json
import pathlib
import sys

from app.ccb import envelope_to_dict, parse_individual_search

SAMPLE_RESPONSE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<ccb_api>"
    "<response>"
    "<service>individual_search</service>"
    '<individuals count="1">'
    '<individual id="48">'
    '<campus id="1">Main Campus</campus>'
    "<first_name>Jöhn</first_name>"
    "<last_name>Dör</last_name>"
    "<addresses>"
    '<address type="mailing"><city>Åcme</city><country code="US">United States</country></address>'
    "</addresses>"
    '<phones><phone type="contact">(555) 010-2000</phone></phones>'
    '<privacy_settings><mailing_address id="3">My Friends</mailing_address></privacy_settings>'
    "</individual>"
    "</individuals>"
    "</response>"
    "</ccb_api>"
)

payload = pathlib.Path(sys.argv[1]).read_bytes() if len(sys.argv) > 1 else SAMPLE_RESPONSE.encode("utf-8")
envelope = parse_individual_search(payload).unwrap()
print('Parsed:', envelope)
print('Output:\n' + json.dumps(envelope_to_dict(envelope), indent=2, ensure_ascii=False))
