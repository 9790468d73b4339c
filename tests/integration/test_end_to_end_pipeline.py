"""End-to-end test: CSV file to rendered invoice."""

from decimal import Decimal

from pint_invoice.aggregators.invoice_accumulator import InvoiceAccumulator
from pint_invoice.models.invoice import InvoiceConfig
from pint_invoice.writers.invoice_renderer import render_invoice


class TestEndToEndPipeline:
    """Run the whole pipeline on a realistic export."""

    def test_export_to_invoice_text(self, tmp_path):
        """Test reading, accumulating, deriving and rendering in one pass."""
        path = tmp_path / "export.csv"
        path.write_text(
            "Project,Client,Description,Duration,Start,End\n"
            "Website,Acme,Layout,1:10:00,09:00,10:10\n"
            "Website,Acme,Review,0:10:00,10:10,10:20\n"
            "Backend,Acme,API,2:45:30:000,10:30,13:15\n"
            "Broken row,Acme\n"
            "Website,Acme,Fixes,0:10:00,14:00,14:10\n",
            encoding="utf-8",
        )

        invoice = (
            InvoiceAccumulator(
                InvoiceConfig(pay_rate=Decimal("80"), tax_rate=Decimal("0.15"))
            )
            .import_csv(path)
            .derive_invoice()
        )

        # 1.17 + 0.17 + 0.17 per rounded increment
        assert invoice.project_hours == {
            "Website": Decimal("1.51"),
            "Backend": Decimal("2.76"),
        }
        assert invoice.total_time == Decimal("4.27")
        assert invoice.subtotal == Decimal("341.60")
        assert invoice.tax == Decimal("51.24")
        assert invoice.total == Decimal("392.84")

        text = render_invoice(invoice, sort_projects=True)
        assert text.splitlines()[2].startswith("Backend")
        assert f"{'Subtotal at $80/hr':<30} {'341.60':>10}" in text
        assert f"{'GST at 15%':<30} {'51.24':>10}" in text
        assert text.endswith(f"{'TOTAL':<30} {'392.84':>10}\n")
