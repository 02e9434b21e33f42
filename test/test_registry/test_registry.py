import dataclasses

import pytest

from freelan.config import build_registry, get_default_registry
from freelan.config.core.registry import OptionDescriptor, OptionKind, OptionRegistry

pytestmark = pytest.mark.unit


class TestOptionRegistry:
    """Test the option schema registry."""

    def setup_method(self):
        self.registry = build_registry()

    def test_groups_in_registration_order(self):
        assert self.registry.groups() == ('fscp', 'security', 'tap_adapter', 'switch')

    def test_every_option_is_registered(self):
        expected = {
            'fscp.hostname_resolution_protocol', 'fscp.listen_on', 'fscp.hello_timeout', 'fscp.contact',
            'security.signature_certificate_file', 'security.signature_private_key_file',
            'security.encryption_certificate_file', 'security.encryption_private_key_file',
            'security.certificate_validation_method', 'security.certificate_validation_script',
            'security.authority_certificate_file',
            'tap_adapter.enabled', 'tap_adapter.ipv4_address_prefix_length',
            'tap_adapter.ipv6_address_prefix_length', 'tap_adapter.arp_proxy_enabled',
            'tap_adapter.arp_proxy_fake_ethernet_address', 'tap_adapter.dhcp_proxy_enabled',
            'tap_adapter.dhcp_server_ipv4_address_prefix_length',
            'tap_adapter.dhcp_server_ipv6_address_prefix_length',
            'switch.routing_method', 'switch.relay_mode_enabled',
        }

        assert set(self.registry.keys()) == expected
        assert len(self.registry) == len(expected)

    def test_descriptor_lookup(self):
        descriptor = self.registry.get('fscp.hello_timeout')

        assert descriptor.group == 'fscp'
        assert descriptor.name == 'hello_timeout'
        assert descriptor.kind is OptionKind.INTEGER
        assert descriptor.default == 3000
        assert not descriptor.required

    def test_required_options(self):
        required = [d.key for d in self.registry if d.required]

        assert required == ['security.signature_certificate_file', 'security.signature_private_key_file']

    def test_list_options_default_to_empty(self):
        for key in ('fscp.contact', 'security.authority_certificate_file'):
            descriptor = self.registry.get(key)
            assert descriptor.is_list
            assert descriptor.default == ()

    def test_unknown_key_is_not_an_error(self):
        assert self.registry.get('fscp.unknown') is None
        assert 'fscp.unknown' not in self.registry
        assert self.registry.descriptors('unknown') == ()

    def test_descriptors_are_immutable(self):
        descriptor = self.registry.get('fscp.listen_on')

        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.default = '127.0.0.1:1'

    def test_frozen_registry_rejects_registration(self):
        assert self.registry.frozen

        with pytest.raises(RuntimeError):
            self.registry.register_group('extra', [OptionDescriptor('extra', 'value')])

    def test_duplicate_group_is_rejected(self):
        registry = OptionRegistry()
        registry.register_group('extra', [OptionDescriptor('extra', 'value')])

        with pytest.raises(ValueError):
            registry.register_group('extra', [])

    def test_descriptor_group_must_match(self):
        registry = OptionRegistry()

        with pytest.raises(ValueError):
            registry.register_group('extra', [OptionDescriptor('other', 'value')])

    def test_default_registry_is_shared(self):
        assert get_default_registry() is get_default_registry()
        assert get_default_registry().frozen
