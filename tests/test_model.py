"""
Tests for the form model
"""
import unittest

from formprint.model import (
    CompanySettings, Field, Form, Group, Signature, SignatureRecord,
)


class FormFromDictTestCase(unittest.TestCase):

    def test_nested_blocks(self):
        form = Form.from_dict({
            "title": "Daily check",
            "revision": "2.0",
            "blocks": [
                {"type": "group", "id": "g1", "title": "Outside", "children": [
                    {"type": "field", "title": "Tyres", "fieldType": "checkbox"},
                    {"type": "group", "title": "Wings", "children": []},
                    {"type": "signature", "title": "Pilot"},
                ]},
            ],
        })
        self.assertEqual(form.revision, "2.0")
        group = form.blocks[0]
        self.assertIsInstance(group, Group)
        self.assertEqual([type(b) for b in group.children], [Field, Group, Signature])
        self.assertEqual(group.children[0].field_type, "checkbox")

    def test_revision_defaults(self):
        self.assertEqual(Form.from_dict({"title": "x"}).revision, "1.0")
        self.assertEqual(Form.from_dict({"revisionLabel": "B"}).revision, "B")

    def test_unknown_block_type_is_skipped(self):
        form = Form.from_dict({"blocks": [{"type": "banner"}, {"type": "field", "title": "a"}]})
        self.assertEqual(len(form.blocks), 1)

    def test_missing_blocks(self):
        self.assertEqual(Form.from_dict({}).blocks, [])
        self.assertEqual(Form.from_dict(None).blocks, [])

    def test_unknown_field_type_falls_back(self):
        self.assertEqual(Field(title="x", field_type="slider").field_type, "short_text")

    def test_signature_include_date_alias(self):
        form = Form.from_dict({"blocks": [{"type": "signature", "includeDate": False}]})
        self.assertFalse(form.blocks[0].requires_date)

    def test_deeply_nested_groups(self):
        leaf = {"type": "field", "title": "Bottom"}
        node = leaf
        for level in range(599, -1, -1):
            node = {"type": "group", "title": f"Level {level}", "children": [node]}
        form = Form.from_dict({"blocks": [node, {"type": "field", "title": "Tail"}]})
        depth, block = 0, form.blocks[0]
        while isinstance(block, Group):
            self.assertEqual(block.title, f"Level {depth}")
            self.assertEqual(len(block.children), 1)
            depth, block = depth + 1, block.children[0]
        self.assertEqual(depth, 600)
        self.assertEqual(block.title, "Bottom")
        self.assertEqual(form.blocks[1].title, "Tail")

    def test_children_keep_order(self):
        form = Form.from_dict({"blocks": [
            {"type": "group", "title": "A", "children": [
                {"type": "field", "title": "a1"},
                {"type": "group", "title": "B", "children": [
                    {"type": "field", "title": "b1"}, {"type": "field", "title": "b2"},
                ]},
                {"type": "field", "title": "a2"},
            ]},
            {"type": "group", "title": "C"},
        ]})
        a = form.blocks[0]
        self.assertEqual([b.title for b in form.blocks], ["A", "C"])
        self.assertEqual([b.title for b in a.children], ["a1", "B", "a2"])
        self.assertEqual([b.title for b in a.children[1].children], ["b1", "b2"])


class RecordsTestCase(unittest.TestCase):

    def test_signature_record_aliases(self):
        rec = SignatureRecord.from_dict({"id": "s1", "name": "Ann", "title": "Inspector"})
        self.assertEqual(rec.title_or_role, "Inspector")
        self.assertIsNone(rec.image_data)

    def test_company_editor_keys(self):
        s = CompanySettings.from_dict({
            "name": "CAT", "vatEori": "DK123", "easaApprovalNo": "DK.145.1",
            "legalText": "Terms apply", "address": "Hangar 2\nRoskilde",
        })
        self.assertEqual(s.vat_id, "DK123")
        self.assertEqual(s.legal_footer_text, "Terms apply")
        self.assertEqual(s.contact_lines(), [
            "Hangar 2", "Roskilde", "VAT: DK123", "Approval No.: DK.145.1",
        ])
