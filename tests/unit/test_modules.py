"""Unit tests for deployment module descriptors and parameter resolution."""

import pytest

from horoscope_deployments.exceptions import (
    DeploymentModuleNotFoundError,
    InvalidParameterError,
    ParameterNotFoundError,
)
from horoscope_deployments.modules import (
    HOROSCOPE_NFT_V3_MODULE,
    WHITELIST_QUIZZ_MODULE,
    WHITELIST_UMBRELLA_MODULE,
    get_module,
    instantiate,
    module_names,
    resolve_parameters,
)

DAPP_SIGNER = "0x78b1792Fd8773D5cB9f601B7AbE50D1390440631"
UMBRELLA_CORP = "0x03C82eef6FaE9c14B224e056c127a4155F47D404"
OTHER_ADDRESS = "0x1111111111111111111111111111111111111111"

ALL_MODULES = [HOROSCOPE_NFT_V3_MODULE, WHITELIST_UMBRELLA_MODULE, WHITELIST_QUIZZ_MODULE]


class TestRegistry:
    """Test module lookup."""

    def test_module_names(self):
        assert module_names() == [
            "HoroscopeNFTv3Module",
            "WhitelistUmbrellaModule",
            "WhitelistQuizzModule",
        ]

    def test_get_module(self):
        assert get_module("WhitelistQuizzModule") is WHITELIST_QUIZZ_MODULE

    def test_unknown_module_raises(self):
        with pytest.raises(DeploymentModuleNotFoundError):
            get_module("TokenModule")

    def test_future_ids(self):
        assert HOROSCOPE_NFT_V3_MODULE.future_id == "HoroscopeNFTv3Module#HoroscopeNFTv3"
        assert WHITELIST_QUIZZ_MODULE.future_id == "WhitelistQuizzModule#WhitelistQuizz"

    @pytest.mark.parametrize("module", ALL_MODULES, ids=lambda m: m.name)
    def test_constructor_args_are_declared_parameters(self, module):
        declared = [param.name for param in module.parameters]
        assert sorted(module.constructor_args) == sorted(declared)


class TestDefaults:
    """Test parameter defaults when no override is supplied."""

    @pytest.mark.parametrize("module", ALL_MODULES, ids=lambda m: m.name)
    def test_default_dapp_signer(self, module):
        assert resolve_parameters(module)["dAppSigner"] == DAPP_SIGNER

    def test_umbrella_capacity_default(self):
        assert resolve_parameters(WHITELIST_UMBRELLA_MODULE)["maxWhitelistedAddresses"] == 20

    def test_quizz_capacity_default(self):
        assert resolve_parameters(WHITELIST_QUIZZ_MODULE)["maxWhitelistedAddresses"] == 80

    def test_quizz_umbrella_reference_default(self):
        params = resolve_parameters(WHITELIST_QUIZZ_MODULE)
        assert params["whitelistUmbrellaContract"] == UMBRELLA_CORP


class TestInstantiate:
    """Test the contract-instantiation instruction."""

    def test_horoscope_args(self):
        result = instantiate(HOROSCOPE_NFT_V3_MODULE)

        assert result.contract_name == "HoroscopeNFTv3"
        assert result.module_name == "HoroscopeNFTv3Module"
        assert result.args == [DAPP_SIGNER]

    def test_umbrella_args_order(self):
        result = instantiate(WHITELIST_UMBRELLA_MODULE)
        assert result.args == [20, DAPP_SIGNER]

    def test_quizz_args_order(self):
        result = instantiate(WHITELIST_QUIZZ_MODULE)

        assert result.contract_name == "WhitelistQuizz"
        assert result.args == [80, DAPP_SIGNER, UMBRELLA_CORP]
        assert result.future_id == "WhitelistQuizzModule#WhitelistQuizz"

    def test_single_override_leaves_others_default(self):
        result = instantiate(WHITELIST_QUIZZ_MODULE, {"maxWhitelistedAddresses": 150})

        assert result.args == [150, DAPP_SIGNER, UMBRELLA_CORP]
        assert result.parameters == {
            "dAppSigner": DAPP_SIGNER,
            "maxWhitelistedAddresses": 150,
            "whitelistUmbrellaContract": UMBRELLA_CORP,
        }

    def test_address_override_used_verbatim(self):
        result = instantiate(HOROSCOPE_NFT_V3_MODULE, {"dAppSigner": OTHER_ADDRESS})
        assert result.args == [OTHER_ADDRESS]

    def test_reapplying_override_is_idempotent(self):
        overrides = {"dAppSigner": OTHER_ADDRESS}

        first = instantiate(WHITELIST_UMBRELLA_MODULE, overrides)
        second = instantiate(WHITELIST_UMBRELLA_MODULE, overrides)

        assert first == second
        assert overrides == {"dAppSigner": OTHER_ADDRESS}

    def test_defaults_unchanged_after_override(self):
        instantiate(WHITELIST_UMBRELLA_MODULE, {"maxWhitelistedAddresses": 5})
        assert instantiate(WHITELIST_UMBRELLA_MODULE).args == [20, DAPP_SIGNER]


class TestOverrideValidation:
    """Test validation of override values."""

    def test_unknown_parameter(self):
        with pytest.raises(ParameterNotFoundError, match="whitelistUmbrellaContract"):
            resolve_parameters(
                WHITELIST_UMBRELLA_MODULE, {"whitelistUmbrellaContract": OTHER_ADDRESS}
            )

    def test_decimal_string_capacity_converted(self):
        params = resolve_parameters(WHITELIST_QUIZZ_MODULE, {"maxWhitelistedAddresses": "42"})
        assert params["maxWhitelistedAddresses"] == 42

    @pytest.mark.parametrize("value", [-1, True, "many", 1.5, None, "\u0664\u0662", "4 2"])
    def test_invalid_capacity(self, value):
        with pytest.raises(InvalidParameterError):
            resolve_parameters(WHITELIST_QUIZZ_MODULE, {"maxWhitelistedAddresses": value})

    @pytest.mark.parametrize("value", ["0x1234", "not-an-address", 1234, None])
    def test_invalid_address(self, value):
        with pytest.raises(InvalidParameterError):
            resolve_parameters(HOROSCOPE_NFT_V3_MODULE, {"dAppSigner": value})

    def test_invalid_value_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_parameters(HOROSCOPE_NFT_V3_MODULE, {"dAppSigner": "0x1234"})
