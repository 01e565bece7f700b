"""
Sample document
---------------
A six-section aircraft maintenance release form with matching answers and
signatures, for checking the renderer end to end without a stored form.
"""
import io

from PIL import Image as PILImage, ImageDraw

from .document import render_document
from .model import CompanySettings, Field, Form, Group, Signature, SignatureRecord

SAMPLE_TITLE = "Aircraft Maintenance Release Certificate"


def _f(id, title, field_type, **kw):
    return Field(id=id, title=title, field_type=field_type, **kw)


def sample_form():
    return Form(
        title=SAMPLE_TITLE,
        revision="2.1",
        description=("Scheduled maintenance inspection record. Complete every "
                     "section; the certifying staff signature releases the "
                     "aircraft to service."),
        blocks=[
            Group(id="g1", title="Aircraft Information", children=[
                _f("f1", "Registration", "short_text", required=True),
                _f("f2", "Aircraft Type", "dropdown",
                   options=["Cessna 172", "Piper PA-28", "Diamond DA40"]),
                _f("f3", "Serial Number", "short_text"),
                _f("f4", "Airframe Total Hours", "number",
                   validation={"minValue": 0, "units": "h"}),
                _f("f5", "Inspection Date", "date", required=True),
                _f("f6", "Base", "short_text"),
            ]),
            Group(id="g2", title="Inspection Checklist",
                  description="Tick every item once inspected and found serviceable.",
                  children=[
                      Group(id="g2a", title="Airframe", children=[
                          _f("f7", "Fuselage skin and rivets", "checkbox"),
                          _f("f8", "Control surfaces and hinges", "checkbox"),
                          _f("f9", "Landing gear and brakes", "checkbox"),
                          _f("f10", "Doors, windows and seals", "checkbox"),
                      ]),
                      Group(id="g2b", title="Powerplant", children=[
                          _f("f11", "Engine oil changed", "checkbox"),
                          _f("f12", "Compression check", "radio",
                             options=["Pass", "Fail", "Not performed"]),
                          _f("f13", "Ignition system", "checkbox"),
                          Group(id="g2b1", title="Propeller", children=[
                              _f("f14", "Blade condition", "radio",
                                 options=["Serviceable", "Dressed", "Replaced"]),
                              _f("f15", "Spinner secure", "checkbox"),
                          ]),
                      ]),
                      Group(id="g2c", title="Avionics", children=[
                          _f("f16", "Systems checked", "multi_choice",
                             options=["COM1", "COM2", "NAV", "Transponder", "ELT"]),
                          _f("f17", "Pitot-static leak test", "checkbox"),
                      ]),
                  ]),
            Group(id="g3", title="Defects and Findings", children=[
                _f("f18", "Findings", "long_text"),
                _f("f19", "Defect Categories", "multi_choice",
                   options=["Structural", "Corrosion", "Wear", "Electrical"]),
                _f("f20", "Deferred Defects", "long_text"),
            ]),
            Group(id="g4", title="Parts and Materials", children=[
                _f("f21", "Parts Replaced", "long_text"),
                _f("f22", "Number of Parts", "number"),
                _f("f23", "Consumables Used", "short_text"),
            ]),
            Group(id="g5", title="Certification", children=[
                _f("f24", "Work Performed To", "radio",
                   options=["AMP", "Manufacturer Manual", "Other"]),
                _f("f25", "Next Inspection Due", "date"),
                _f("f26", "Airworthy", "checkbox"),
                _f("f27", "Remarks", "long_text"),
            ]),
            Group(id="g6", title="Sign-off", children=[
                Signature(id="s1", title="Inspector Signature"),
                Signature(id="s2", title="Certifying Staff Signature"),
                Signature(id="s3", title="Customer Acceptance"),
            ]),
        ],
    )


def sample_answers():
    return {
        "Registration": "OY-CAT",
        "Aircraft Type": "Cessna 172",
        "Serial Number": "17281234",
        "Airframe Total Hours": "4523.6",
        "Inspection Date": "2024-03-14",
        "Base": "Roskilde (EKRK)",
        "Fuselage skin and rivets": True,
        "Control surfaces and hinges": True,
        "Landing gear and brakes": False,
        "Doors, windows and seals": True,
        "Engine oil changed": True,
        "Compression check": "Pass",
        "Ignition system": True,
        "Blade condition": "Dressed",
        "Spinner secure": True,
        "Systems checked": {"COM1": True, "COM2": False, "NAV": True,
                            "Transponder": True, "ELT": False},
        "Pitot-static leak test": False,
        "Findings": (
            "Left main gear brake pad worn below limits; replaced with new pad "
            "set and bled the system. Minor surface corrosion found on the lower "
            "cowling attach points, treated and protected. Right aileron hinge "
            "bolt showed slight play, torqued to specification and safetied. "
            "Cabin door seal cracked at the lower aft corner, temporary repair "
            "carried out pending delivery of a replacement seal. "
        ) * 3,
        "Defect Categories": {"Structural": False, "Corrosion": True,
                              "Wear": True, "Electrical": False},
        "Deferred Defects": (
            "Cabin door seal replacement deferred under MEL item 52-1, parts on "
            "order. Repeat inspection of the temporary repair every 10 flight "
            "hours until the seal is replaced. "
        ) * 2,
        "Parts Replaced": (
            "Brake pad set P/N 066-10500 x2; cotter pins AN380-2-2 x4; oil filter "
            "CH48110-1 x1; spark plugs REM40E x8; lockwire MS20995C32 as required; "
            "cowling fastener 7591-100 x2. "
        ) * 2,
        "Number of Parts": "19",
        "Consumables Used": "Aeroshell W100 7 qt, corrosion inhibitor",
        "Work Performed To": "AMP",
        "Next Inspection Due": "2024-09-14",
        "Airworthy": True,
        "Remarks": (
            "Aircraft released to service subject to the deferred defect listed "
            "above. Ground run and leak check satisfactory. Logbook entries made."
        ),
        "Inspector Signature": "sig-inspector",
        "Certifying Staff Signature": "sig-certifier",
        "Customer Acceptance": "",
    }


def signature_image(width=300, height=90):
    """A hand-drawn looking PNG for the sample signatures."""
    img = PILImage.new("RGB", (width, height), "white")
    d = ImageDraw.Draw(img)
    pts = [(10 + i * 14, height // 2 + (18 if i % 2 else -18)) for i in range(20)]
    d.line(pts, fill=(20, 40, 120), width=3)
    out = io.BytesIO()
    img.save(out, "PNG")
    return out.getvalue()


def sample_signatures():
    return [
        SignatureRecord("sig-inspector", "Anne Holm", "B1 Inspector",
                        signature_image()),
        SignatureRecord("sig-certifier", "Jens Madsen", "Certifying Staff (B1/B2)"),
    ]


def sample_company():
    return CompanySettings(
        name="Copenhagen AirTaxi / CAT Flyservice",
        address="Roskilde Airport, Hangar 2\n4000 Roskilde, Denmark",
        phone="+45 46 19 11 14",
        email="maintenance@example.com",
        approval_no="DK.145.0012",
        legal_footer_text=("This certificate is issued under Part-145 approval. "
                           "Any alteration invalidates the release to service."),
    )


def render_sample_document(company_settings=None, **kwargs):
    """Render the sample form; extra keyword arguments go to render_document."""
    if company_settings is None:
        company_settings = sample_company()
    return render_document(sample_form(), sample_answers(), sample_signatures(),
                           company_settings, **kwargs)
