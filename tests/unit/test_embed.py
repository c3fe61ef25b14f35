"""
Tests for the Discord embed model.

Tests canonical forms of Author, Field, Footer, Body and Embed.
"""

import pytest

from issuehook.infrastructure.notification.discord.embed import (
    Author,
    Body,
    Embed,
    Field,
    Footer,
)
from tests.fixtures.test_data import HEX_COLOR_CASES, INVALID_HEX_COLORS


class TestAuthor:
    """Tests for Author."""

    def test_canonical_form_uses_snake_case_icon_url(self):
        author = Author('Alice', 'https://example.com/alice', 'https://example.com/a.png')

        assert author.to_canonical_form() == {
            'name': 'Alice',
            'url': 'https://example.com/alice',
            'icon_url': 'https://example.com/a.png'
        }

    def test_absent_attributes_are_null(self):
        assert Author('Alice').to_canonical_form() == {
            'name': 'Alice',
            'url': None,
            'icon_url': None
        }

    def test_mutators_overwrite(self):
        author = Author('Alice')
        author.name = 'Bob'
        author.icon_url = 'https://example.com/b.png'

        form = author.to_canonical_form()
        assert form['name'] == 'Bob'
        assert form['icon_url'] == 'https://example.com/b.png'


class TestField:
    """Tests for Field."""

    def test_description_is_renamed_to_value(self):
        field = Field(name='A', description='B', is_inline=True)

        assert field.to_canonical_form() == {'name': 'A', 'value': 'B', 'inline': True}

    def test_inline_absent_by_default(self):
        assert Field('A', 'B').to_canonical_form()['inline'] is None


class TestFooter:
    """Tests for Footer."""

    def test_canonical_form(self):
        footer = Footer('Acme Website', 'https://example.com/icon.png')

        assert footer.to_canonical_form() == {
            'text': 'Acme Website',
            'icon_url': 'https://example.com/icon.png'
        }

    def test_footer_has_no_timestamp(self):
        assert 'timestamp' not in Footer('x').to_canonical_form()


class TestBody:
    """Tests for Body."""

    @pytest.mark.parametrize('hex_color,expected', HEX_COLOR_CASES)
    def test_color_serializes_to_decimal(self, hex_color, expected):
        body = Body(color=hex_color)

        assert body.to_canonical_form()['color'] == expected

    def test_default_color_is_white(self):
        assert Body().to_canonical_form()['color'] == 16777215

    def test_empty_color_is_stored_as_given(self):
        constructed = Body(color='')
        assigned = Body()
        assigned.color = ''

        assert constructed.color == assigned.color == ''
        for body in (constructed, assigned):
            with pytest.raises(ValueError):
                body.to_canonical_form()

    def test_color_setter_overwrites(self):
        body = Body()
        body.color = 'FF0000'

        assert body.color_value == 16711680

    @pytest.mark.parametrize('hex_color', INVALID_HEX_COLORS)
    def test_malformed_color_raises_value_error(self, hex_color):
        body = Body(color=hex_color)

        with pytest.raises(ValueError):
            body.to_canonical_form()

    def test_canonical_form_key_order(self):
        body = Body('T', 'D', 'https://example.com', 'FF0000', '2025-01-01T00:00:00+00:00')

        assert list(body.to_canonical_form()) == [
            'title', 'description', 'url', 'color', 'timestamp'
        ]

    def test_set_date_to_now(self):
        body = Body()
        body.set_date_to_now()

        assert body.timestamp is not None
        assert body.timestamp.endswith('+00:00')


class TestEmbed:
    """Tests for Embed."""

    def test_empty_embed(self):
        assert Embed().to_canonical_form() == {
            'author': None,
            'fields': [],
            'footer': None
        }

    def test_body_is_flattened_into_top_level(self):
        embed = Embed(body=Body(title='Issue ABC-1 Created', color='FF0000'))

        form = embed.to_canonical_form()
        assert form['title'] == 'Issue ABC-1 Created'
        assert form['color'] == 16711680
        assert 'body' not in form

    def test_author_and_footer_are_nested(self):
        embed = Embed(author=Author('Alice'), footer=Footer('Acme'))

        form = embed.to_canonical_form()
        assert form['author'] == {'name': 'Alice', 'url': None, 'icon_url': None}
        assert form['footer'] == {'text': 'Acme', 'icon_url': None}

    def test_add_field_preserves_order(self):
        f1, f2, f3 = Field('1', 'a'), Field('2', 'b'), Field('3', 'c')
        embed = Embed(fields=[f1, f2])

        embed.add_field(f3)

        assert embed.fields == [f1, f2, f3]
        assert [f['name'] for f in embed.to_canonical_form()['fields']] == ['1', '2', '3']

    def test_add_image_url_preserves_order(self):
        embed = Embed()
        embed.add_image_url('https://example.com/1.png')
        embed.add_image_url('https://example.com/2.png')

        assert embed.image_urls == ['https://example.com/1.png', 'https://example.com/2.png']

    def test_image_omitted_when_not_set(self):
        assert 'image' not in Embed().to_canonical_form()

    def test_image_included_when_set(self):
        embed = Embed()
        embed.add_image_url('https://example.com/1.png')

        assert embed.to_canonical_form()['image'] == {'url': 'https://example.com/1.png'}

    def test_first_image_wins(self):
        embed = Embed(image_urls=['https://example.com/1.png', 'https://example.com/2.png'])

        assert embed.to_canonical_form()['image'] == {'url': 'https://example.com/1.png'}

    def test_thumbnail(self):
        embed = Embed()
        assert 'thumbnail' not in embed.to_canonical_form()

        embed.thumbnail_url = 'https://example.com/t.png'
        assert embed.to_canonical_form()['thumbnail'] == {'url': 'https://example.com/t.png'}

    def test_key_order(self):
        embed = Embed(
            author=Author('Alice'),
            body=Body(title='T'),
            image_urls=['https://example.com/1.png'],
            thumbnail_url='https://example.com/t.png',
            footer=Footer('F')
        )

        assert list(embed.to_canonical_form()) == [
            'title', 'description', 'url', 'color', 'timestamp',
            'author', 'fields', 'image', 'thumbnail', 'footer'
        ]

    def test_instances_do_not_share_lists(self):
        first, second = Embed(), Embed()
        first.add_field(Field('A', 'B'))
        first.add_image_url('https://example.com/1.png')

        assert second.fields == []
        assert second.image_urls == []
