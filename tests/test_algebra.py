# Multicomplex: Multicomplex Number Algebra for PyTorch (C) 2026
# Licensed under the Apache License, Version 2.0

"""Tests for the multicomplex algebra kernel: product table, matrix
representation and multiplication."""

import pytest
import torch
from core.algebra import MulticomplexAlgebra
from core.validation import OrderMismatchError, ShapeError, UnsupportedOrderError


@pytest.fixture
def bicomplex():
    """Order 2 algebra (units i1, i2)."""
    return MulticomplexAlgebra(2, device='cpu')


@pytest.fixture
def tricomplex():
    return MulticomplexAlgebra(3, device='cpu')


class TestProductTable:
    def test_units_square_to_minus_one(self, tricomplex):
        for k in (1, 2, 4):
            assert tricomplex.basis_product(k, k) == (-1, 0)

    def test_distinct_units_commute(self, bicomplex):
        """i1 i2 == i2 i1 == +i1i2 (no sign from reordering)."""
        assert bicomplex.basis_product(1, 2) == (1, 3)
        assert bicomplex.basis_product(2, 1) == (1, 3)

    def test_mixed_products(self, bicomplex):
        # (i1 i2)^2 = i1^2 i2^2 = +1
        assert bicomplex.basis_product(3, 3) == (1, 0)
        # i1i2 * i1 = -i2
        assert bicomplex.basis_product(3, 1) == (-1, 2)

    def test_table_is_symmetric(self):
        alg = MulticomplexAlgebra(5)
        assert torch.equal(alg.cayley_indices, alg.cayley_indices.T)
        assert torch.equal(alg.cayley_signs, alg.cayley_signs.T)

    def test_basis_labels(self, tricomplex):
        labels = [tricomplex.basis_label(k) for k in range(tricomplex.dim)]
        assert labels == ["1", "i1", "i2", "i1i2", "i3", "i1i3", "i2i3", "i1i2i3"]

    def test_basis_product_out_of_range(self, bicomplex):
        with pytest.raises(IndexError):
            bicomplex.basis_product(0, 4)

    def test_negative_order_rejected(self):
        with pytest.raises(UnsupportedOrderError):
            MulticomplexAlgebra(-1)

    def test_table_built_on_first_use(self):
        alg = MulticomplexAlgebra(9, device="cpu")
        MulticomplexAlgebra._CACHED_TABLES.pop((9, "cpu"), None)
        x = torch.zeros(alg.dim, dtype=torch.int8)
        alg.multiply(x, x)
        assert (9, "cpu") not in MulticomplexAlgebra._CACHED_TABLES
        assert alg.basis_product(1, 1) == (-1, 0)
        assert (9, "cpu") in MulticomplexAlgebra._CACHED_TABLES


class TestMatrixRepresentation:
    def test_order_zero(self):
        alg = MulticomplexAlgebra(0)
        M = alg.matrep(torch.tensor([7.0]))
        assert torch.equal(M, torch.tensor([[7.0]]))

    def test_complex_anchor(self):
        """matrep(x + i y) == [[x, -y], [y, x]]."""
        alg = MulticomplexAlgebra(1)
        for x, y in [(1.0, 2.0), (-3.0, 0.5), (0.0, -1.0)]:
            M = alg.matrep(torch.tensor([x, y]))
            assert torch.equal(M, torch.tensor([[x, -y], [y, x]]))

    def test_bicomplex_blocks(self, bicomplex):
        x, y, u, v = 1, 2, 3, 4
        M = bicomplex.matrep(torch.tensor([x, y, u, v]))
        expected = torch.tensor([
            [x, -y, -u, v],
            [y, x, -v, -u],
            [u, -v, x, -y],
            [v, u, y, x],
        ])
        assert torch.equal(M, expected)

    def test_block_structure_recursive(self):
        """Order N matrep is [[R, -I], [I, R]] of the order N-1 halves."""
        alg = MulticomplexAlgebra(4)
        lower = MulticomplexAlgebra(3)
        x = torch.randn(16, dtype=torch.float64)
        M = alg.matrep(x)
        R = lower.matrep(alg.real(x))
        I = lower.matrep(alg.imag(x))
        assert torch.equal(M[:8, :8], R)
        assert torch.equal(M[:8, 8:], -I)
        assert torch.equal(M[8:, :8], I)
        assert torch.equal(M[8:, 8:], R)

    @pytest.mark.parametrize("order", [0, 1, 2, 3, 4, 5])
    def test_matches_product_table(self, order):
        alg = MulticomplexAlgebra(order)
        x = torch.randn(3, alg.dim, dtype=torch.float64)
        assert torch.equal(alg.matrep(x), alg.table_matrep(x))

    def test_batched_shape(self, tricomplex):
        x = torch.randn(5, 2, 8)
        assert tricomplex.matrep(x).shape == (5, 2, 8, 8)

    def test_homomorphism(self, tricomplex):
        """matrep(a b) == matrep(a) matrep(b)."""
        torch.manual_seed(0)
        a = torch.randn(8, dtype=torch.float64)
        b = torch.randn(8, dtype=torch.float64)
        lhs = tricomplex.matrep(tricomplex.multiply(a, b))
        rhs = tricomplex.matrep(a) @ tricomplex.matrep(b)
        assert torch.allclose(lhs, rhs, atol=1e-12)

    def test_wrong_length_rejected(self, bicomplex):
        with pytest.raises(ShapeError):
            bicomplex.matrep(torch.zeros(8))
        with pytest.raises(ShapeError):
            bicomplex.matrep(torch.zeros(3))


class TestMultiply:
    def test_square_two_paths_agree(self, bicomplex):
        """(1 + 2 i1 + 3 i2 + 4 i1i2)^2 = 4 - 20 i1 - 10 i2 + 20 i1i2."""
        a = torch.tensor([1, 2, 3, 4])
        product = bicomplex.multiply(a, a)
        via_matrep = bicomplex.matrep(a) @ a
        expected = torch.tensor([4, -20, -10, 20])
        assert torch.equal(product, expected)
        assert torch.equal(via_matrep, expected)

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    def test_commutative_exact(self, order):
        alg = MulticomplexAlgebra(order)
        torch.manual_seed(order)
        a = torch.randint(-5, 6, (10, alg.dim))
        b = torch.randint(-5, 6, (10, alg.dim))
        assert torch.equal(alg.multiply(a, b), alg.multiply(b, a))

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    def test_associative_exact(self, order):
        alg = MulticomplexAlgebra(order)
        torch.manual_seed(100 + order)
        a, b, c = torch.randint(-4, 5, (3, 6, alg.dim))
        lhs = alg.multiply(alg.multiply(a, b), c)
        rhs = alg.multiply(a, alg.multiply(b, c))
        assert torch.equal(lhs, rhs)

    def test_commutative_float(self, tricomplex):
        torch.manual_seed(7)
        a = torch.randn(20, 8, dtype=torch.float64)
        b = torch.randn(20, 8, dtype=torch.float64)
        assert torch.allclose(tricomplex.multiply(a, b), tricomplex.multiply(b, a), atol=1e-12)

    def test_distributive(self, tricomplex):
        torch.manual_seed(3)
        a, b, c = torch.randn(3, 4, 8, dtype=torch.float64)
        lhs = tricomplex.multiply(a, tricomplex.add(b, c))
        rhs = tricomplex.multiply(a, b) + tricomplex.multiply(a, c)
        assert torch.allclose(lhs, rhs, atol=1e-12)

    def test_identity_element(self, tricomplex):
        one = tricomplex.embed_scalar(torch.tensor(1.0))
        x = torch.randn(8)
        assert torch.equal(tricomplex.multiply(one, x), x)

    def test_int8_dtype_preserved(self, bicomplex):
        i1 = bicomplex.unit(1)
        out = bicomplex.multiply(i1, i1)
        assert out.dtype == torch.int8
        assert out.tolist() == [-1, 0, 0, 0]

    def test_broadcast_batches(self, bicomplex):
        a = torch.randn(3, 4)
        b = torch.randn(4)
        out = bicomplex.multiply(a, b)
        assert out.shape == (3, 4)
        assert torch.allclose(out[1], bicomplex.multiply(a[1], b))

    def test_matrep_action(self, tricomplex):
        """matrep(a) . components(b) == components(a b)."""
        a = torch.randn(8, dtype=torch.float64)
        b = torch.randn(8, dtype=torch.float64)
        assert torch.allclose(tricomplex.matrep(a) @ b, tricomplex.multiply(a, b), atol=1e-12)

    def test_order_mismatch(self, bicomplex):
        with pytest.raises(OrderMismatchError):
            bicomplex.multiply(torch.zeros(4), torch.zeros(8))
        with pytest.raises(OrderMismatchError):
            bicomplex.add(torch.zeros(2), torch.zeros(2))


class TestComponents:
    def test_realest_matches_component_zero(self):
        alg = MulticomplexAlgebra(4)
        x = torch.randn(3, 16)
        assert torch.equal(alg.realest(x), alg.component(x, 0))

    def test_component_bounds(self, bicomplex):
        x = torch.arange(4)
        assert bicomplex.component(x, 3).item() == 3
        with pytest.raises(IndexError):
            bicomplex.component(x, 4)
        with pytest.raises(IndexError):
            bicomplex.component(x, -1)

    def test_conj_negates_top_half_only(self, bicomplex):
        x = torch.tensor([1, 2, 3, 4])
        assert bicomplex.conj(x).tolist() == [1, 2, -3, -4]

    def test_from_pair_concatenates(self, bicomplex):
        out = bicomplex.from_pair(torch.tensor([1, 2]), torch.tensor([3, 4]))
        assert out.tolist() == [1, 2, 3, 4]

    def test_unit_out_of_range(self, bicomplex):
        with pytest.raises(IndexError):
            bicomplex.unit(3)
