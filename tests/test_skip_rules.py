"""
Tests for the structural skip-rule classifier
"""
import pytest
from bs4 import BeautifulSoup

from conftest import FakeTreeAdapter, el, txt
from src.hosts.soup import SoupTreeAdapter
from src.linking.skip_rules import CallbackInspector, SkipRuleClassifier


@pytest.fixture
def classifier(fake_adapter):
    return SkipRuleClassifier(fake_adapter)


class TestTagRules:
    """Test tag-based skipping"""

    @pytest.mark.parametrize("tag", ["nav", "NAV", "script", "h2", "figcaption", "code", "a", "button"])
    def test_skipped_tags(self, classifier, tag):
        """Chrome, code and interactive tags are skipped in any case"""
        outcome = classifier.classify(el(tag))
        assert outcome.skip
        assert outcome.reason == f"tag:{tag.upper()}"

    def test_paragraph_kept(self, classifier):
        """Plain body text is eligible"""
        assert not classifier.classify(el('p')).skip

    def test_list_items_outside_article(self, classifier):
        """List items and table cells are skipped outside an article body"""
        assert classifier.should_skip(el('li'))
        assert classifier.should_skip(el('td'))

    def test_list_items_inside_article(self, classifier):
        """List items and table cells are allowed inside an article body"""
        assert not classifier.should_skip(el('li'), inside_article=True)
        assert not classifier.should_skip(el('th', class_='caption'), inside_article=True)

    def test_root_never_skipped(self, classifier):
        """The selected article root is entered even if it would match a rule"""
        assert not classifier.classify(el('nav'), is_root=True).skip


class TestSelectorRules:
    """Test ancestor-or-self selector matching"""

    def test_navigation_role_ancestor(self, classifier):
        """Anything under role=navigation is skipped"""
        paragraph = el('p', txt("Barack Obama"))
        el('div', paragraph, role='navigation')
        outcome = classifier.classify(paragraph)
        assert outcome.skip
        assert outcome.reason == 'selector:[role="navigation"]'

    def test_aria_hidden(self, classifier):
        """Hidden content is skipped"""
        assert classifier.should_skip(el('span', aria_hidden='true'))
        assert not classifier.should_skip(el('span', aria_hidden='false'))

    def test_commerce_attribute(self, classifier):
        """Affiliate and commerce blocks are skipped by attribute presence"""
        paragraph = el('p')
        el('section', paragraph, data_commerce='')
        assert classifier.should_skip(paragraph)


class TestClassRules:
    """Test class-substring matching"""

    def test_own_class(self, classifier):
        """Class substrings on the node itself are skipped"""
        outcome = classifier.classify(el('div', class_='story-byline'))
        assert outcome.skip
        assert outcome.reason == 'class:byline'

    def test_case_insensitive(self, classifier):
        """Class matching ignores case"""
        assert classifier.should_skip(el('div', class_='PromoBox'))

    def test_ancestor_class_ignored(self, classifier):
        """Only the node's own class is checked"""
        paragraph = el('p')
        el('div', paragraph, class_='sidebar')
        assert not classifier.should_skip(paragraph)

    def test_custom_patterns(self, fake_adapter):
        """Pattern list is configurable"""
        classifier = SkipRuleClassifier(fake_adapter, class_patterns=['newsletter'])
        assert classifier.should_skip(el('div', class_='Newsletter-signup'))
        assert not classifier.should_skip(el('div', class_='story-byline'))


class TestErrorHandling:
    """Test that interrogation failures degrade to skip"""

    def test_callback_error_skips(self):
        """A raising host callback yields a skip outcome carrying the error"""
        def broken_closest(node, selector):
            raise RuntimeError("detached node")

        classifier = SkipRuleClassifier(CallbackInspector(broken_closest, tag_fn=lambda node: 'DIV'))
        outcome = classifier.classify(object())
        assert outcome.skip
        assert outcome.reason == 'error'
        assert "RuntimeError: detached node" in outcome.error

    def test_missing_node_skips(self, classifier):
        """A missing node is skipped"""
        outcome = classifier.classify(None)
        assert outcome.skip
        assert outcome.error

    def test_callback_inspector(self):
        """Callback inspector delegates to the supplied callables"""
        inspector = CallbackInspector(
            lambda node, selector: selector == '[role="search"]',
            class_fn=lambda node: None,
            tag_fn=lambda node: 'p',
        )
        classifier = SkipRuleClassifier(inspector)
        outcome = classifier.classify(object())
        assert outcome.skip
        assert outcome.reason == 'selector:[role="search"]'


class TestHostIndependence:
    """Test that equivalent trees get the same decisions from any host"""

    HTML = (
        '<div id="root">'
        '<nav><p>menu Barack Obama</p></nav>'
        '<div role="navigation"><span>more Barack Obama</span></div>'
        '<p class="caption">photo Barack Obama</p>'
        '<p>body Barack Obama</p>'
        '</div>'
    )

    EXPECTED = [True, False, True, True, True, False]

    def test_soup_and_fake_agree(self):
        """Parsed HTML and the fake host classify the same structure identically"""
        soup = BeautifulSoup(self.HTML, 'html.parser')
        soup_classifier = SkipRuleClassifier(SoupTreeAdapter(soup))
        soup_nodes = soup.find(id='root').find_all(True)
        soup_decisions = [soup_classifier.should_skip(node) for node in soup_nodes]

        fake_root = el(
            'div',
            el('nav', el('p', txt("menu Barack Obama"))),
            el('div', el('span', txt("more Barack Obama")), role='navigation'),
            el('p', txt("photo Barack Obama"), class_='caption'),
            el('p', txt("body Barack Obama")),
        )
        fake_classifier = SkipRuleClassifier(FakeTreeAdapter())
        fake_nodes = [fake_root.children[0], fake_root.children[0].children[0],
                      fake_root.children[1], fake_root.children[1].children[0],
                      fake_root.children[2], fake_root.children[3]]
        fake_decisions = [fake_classifier.should_skip(node) for node in fake_nodes]

        assert soup_decisions == self.EXPECTED
        assert fake_decisions == self.EXPECTED
