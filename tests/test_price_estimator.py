from services.price_estimator import estimate_price, DEFAULT_UNIT_PRICE


class TestEstimatePrice:
    def test_exact_match(self):
        assert estimate_price("Paracetamol") == 5000
        assert estimate_price("Azithromycin", "Vỉ") == 25000

    def test_exact_match_ignores_case_and_whitespace(self):
        assert estimate_price("paracetamol ") == 5000
        assert estimate_price("  VITAMIN C") == 3000

    def test_partial_match_either_direction(self):
        # Tên nhập chứa tên tham khảo
        assert estimate_price("Paracetamol Extra") == 5000
        # Tên tham khảo chứa tên nhập
        assert estimate_price("Amoxi") == 15000

    def test_partial_match_follows_table_order(self):
        # "in" khớp nhiều tên, lấy tên đầu tiên trong bảng có chứa "in"
        assert estimate_price("in") == 15000

    def test_unknown_name_uses_unit_price(self):
        assert estimate_price("Unknown Drug X", "Chai") == 25000
        assert estimate_price("Thuốc lạ", "ống") == 15000
        assert estimate_price("Thuốc lạ", "Vỉ") == 20000

    def test_empty_name_uses_unit_price(self):
        assert estimate_price("", "Gói") == 8000
        assert estimate_price("   ", "Viên") == 10000

    def test_unknown_unit_uses_default(self):
        assert estimate_price("", "Hộp") == DEFAULT_UNIT_PRICE
        assert estimate_price("Thuốc lạ") == DEFAULT_UNIT_PRICE

    def test_never_raises_on_bad_input(self):
        assert estimate_price(None, None) == DEFAULT_UNIT_PRICE
        assert estimate_price(123, "Chai") == 25000
