"""Request and response records exchanged as JSON by the API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _meta(name: str, kind: type, omitempty: bool, item: type | None = None) -> dict:
    return {"json": name, "kind": kind, "omitempty": omitempty, "item": item}


def _s(name: str, omitempty: bool = False) -> Any:
    return field(default="", metadata=_meta(name, str, omitempty))


def _i(name: str, omitempty: bool = False) -> Any:
    return field(default=0, metadata=_meta(name, int, omitempty))


def _t(name: str, omitempty: bool = False) -> Any:
    return field(default=ZERO_TIME, metadata=_meta(name, datetime, omitempty))


def _l(name: str, item: type, omitempty: bool = False) -> Any:
    return field(default_factory=list, metadata=_meta(name, list, omitempty, item))


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    if value.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def _parse_time(key: str, value: Any) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"value for key '{key}' is not a time string")
    text = value[:-1] + "+00:00" if value[-1:] in ("Z", "z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"value for key '{key}' is not a valid time: {value!r}") from exc


def _is_empty(value: Any) -> bool:
    if isinstance(value, (str, list)):
        return not value
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    return False


def _find_key(data: Mapping, name: str) -> str | None:
    if name in data:
        return name
    folded = name.casefold()
    return next(
        (k for k in data if isinstance(k, str) and k.casefold() == folded), None
    )


class JsonModel:
    """Base for records with JSON field names and optional omission of empty values."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping, skipping empty fields marked omitempty."""
        out: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            meta = f.metadata
            value = getattr(self, f.name)
            if meta["omitempty"] and _is_empty(value):
                continue
            if meta["kind"] is datetime:
                value = _format_time(value)
            elif meta["kind"] is list:
                value = [entry.to_dict() for entry in value]
            out[meta["json"]] = value
        return out

    @classmethod
    def from_dict(cls, data):
        """Build a record from decoded JSON; keys match case-insensitively, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError(f"cannot decode {type(data).__name__} into {cls.__name__}")
        values: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            meta = f.metadata
            key = _find_key(data, meta["json"])
            if key is None or data[key] is None:
                continue
            raw = data[key]
            kind = meta["kind"]
            if kind is str:
                if not isinstance(raw, str):
                    raise TypeError(f"value for key '{key}' is not a string")
                values[f.name] = raw
            elif kind is int:
                if isinstance(raw, bool) or not isinstance(raw, int):
                    raise TypeError(f"value for key '{key}' is not an integer")
                values[f.name] = raw
            elif kind is datetime:
                values[f.name] = _parse_time(key, raw)
            else:
                if not isinstance(raw, list):
                    raise TypeError(f"value for key '{key}' is not an array")
                item_cls = meta["item"]
                values[f.name] = [item_cls.from_dict(entry) for entry in raw]
        return cls(**values)


@dataclass
class CustomerNew(JsonModel):
    id: int = _i("id")
    nama_perusahaan: str = _s("nama_perusahaan")
    address_perusahaan: str = _s("address_perusahaan")
    npwp_address_perusahaan: str = _s("npwp_address_perusahaan")
    npwp_perusahaan: str = _s("npwp_perusahaan")
    ipak_number_perusahaan: str = _s("ipak_number_perusahaan")
    alamat_pengirim_facture_perusahaan: str = _s("alamat_pengirim_facture_perusahaan")
    kota_perusahaan: str = _s("kota_perusahaan")
    kode_pos_perusahaan: str = _s("kode_pos_perusahaan")
    telpon_perusahaan: str = _s("telpon_perusahaan")
    email_perusahaan: str = _s("email_perusahaan")
    nama_dokter: str = _s("nama_dokter")
    alamat_pengirim_dokter: str = _s("alamat_pengirim_dokter")
    npwp_dokter: str = _s("npwp_dokter")
    telpon_dokter: str = _s("telpon_dokter")
    email_dokter: str = _s("email_dokter")
    pic_dokter: str = _s("pic_dokter")
    kota_dokter: str = _s("kota_dokter")
    kode_pos_dokter: str = _s("kode_pos_dokter")
    handphone_dokter: str = _s("handphone_dokter")
    kode_pajak_dokter: str = _s("kode_pajak_dokter")
    cp_dokter: str = _s("cp_dokter")
    verifikasi_dokter: str = _s("verifikasi_dokter")
    created_at: datetime = _t("created_at")
    created_by: str = _s("created_by")
    updated_at: datetime = _t("updated_at")
    updated_by: str = _s("updated_by")
    pembuat_cp_dokter: str = _s("pembuat_cp_dokter")
    term_of_payment: str = _s("term_of_payment")
    kategori_divisi: str = _s("kategori_divisi")


@dataclass
class DoctorName(JsonModel):
    nama: str = _s("namaDokter")


@dataclass
class StockBarang(JsonModel):
    id: int = _i("id", True)
    variable: str = _s("variable")
    name: str = _s("name", True)
    total: str = _s("total", True)
    price: str = _s("price", True)
    created_at: datetime = _t("created_at", True)
    created_by: str = _s("created_by", True)
    updated_at: datetime = _t("updated_at", True)
    updated_by: str = _s("updated_by", True)
    katalog: str = _s("katalog", True)
    gudang: str = _s("gudang", True)
    kode: str = _s("kode")
    qty: int = _i("qty")


@dataclass
class RequestID(JsonModel):
    id: str = _s("id", True)
    divisi: str = _s("divisi", True)
    export: str = _s("export", True)
    nama: str = _s("nama")
    dok: str = _s("dok")


@dataclass
class PerformanceInvoice(JsonModel):
    id: int = _i("id", True)
    customer_id: int = _i("customer_id", True)
    status: str = _s("status", True)
    divisi: str = _s("divisi", True)
    invoice_number: str = _s("invoice_number", True)
    po_number: str = _s("po_number", True)
    sub_total: str = _s("sub_total", True)
    pajak: str = _s("pajak", True)
    total: str = _s("total", True)
    created_at: str = _s("created_at", True)
    created_by: str = _s("created_by", True)
    update_at: str = _s("update_at", True)
    updated_by: str = _s("updated_by", True)
    nama_company: str = _s("nama_company", True)


@dataclass
class ReqItem(JsonModel):
    kat: str = _s("kat", True)
    nama_barang: str = _s("nama_barang", True)
    quantity: str = _s("quantity", True)
    harga_satuan: str = _s("harga_satuan", True)
    discount: str = _s("discount", True)


@dataclass
class ReqInquiryPI(JsonModel):
    id_divisi: str = _s("id_divisi", True)
    rumah_sakit: str = _s("rumah_sakit", True)
    alamat: str = _s("alamat", True)
    jatuh_tempo: str = _s("jatuh_tempo", True)
    nama_dokter: str = _s("nama_dokter", True)
    nama_pasien: str = _s("nama_pasien", True)
    id_rumah_sakit: str = _s("id_rumah_sakit", True)
    tanggal_tindakan: str = _s("tanggal_tindakan", True)
    rm: str = _s("rm", True)
    item: list = _l("item", ReqItem, True)


@dataclass
class ResItem(JsonModel):
    kat: str = _s("kat", True)
    nama_barang: str = _s("nama_barang", True)
    quantity: str = _s("quantity", True)
    harga_satuan: str = _s("harga_satuan", True)
    discount: str = _s("discount", True)
    sub_total_item: str = _s("sub_total_item", True)
    sub_total_item_rp: str = _s("RP_sub_total_item", True)


@dataclass
class ResInquiryPI(JsonModel):
    id_divisi: str = _s("id_divisi", True)
    id_rumah_sakit: str = _s("id_rumah_sakit", True)
    rumah_sakit: str = _s("rumah_sakit", True)
    alamat: str = _s("alamat", True)
    nomor_invoice: str = _s("nomor_invoice", True)
    nomor_po: str = _s("nomor_po", True)
    nomor_si: str = _s("nomor_si", True)
    tanggal: str = _s("tanggal", True)
    jatuh_tempo: str = _s("jatuh_tempo", True)
    sub_total: str = _s("sub_total", True)
    pajak_ppn: str = _s("pajak_ppn", True)
    total: str = _s("total", True)
    sub_total_rp: str = _s("RP_sub_total", True)
    pajak_ppn_rp: str = _s("RP_pajak_ppn", True)
    total_rp: str = _s("RP_total", True)
    nama_dokter: str = _s("nama_dokter", True)
    nama_pasien: str = _s("nama_pasien", True)
    tanggal_tindakan: str = _s("tanggal_tindakan", True)
    rm: str = _s("rm", True)
    item: list = _l("item", ResItem, True)


@dataclass
class Customer(JsonModel):
    id: int = _i("id", True)
    name: str = _s("name", True)
    name_company: str = _s("nama_company", True)
    address_company: str = _s("address_company", True)
    npwp_address: str = _s("npwp_address", True)
    npwp: str = _s("npwp", True)
    ipak_number: str = _s("ipak_number", True)
    facture_address: str = _s("facture_address", True)
    city_facture: str = _s("city_facture", True)
    zip_code_facture: str = _s("zip_code_facture", True)
    number_phone_facture: str = _s("number_phone_facture", True)
    email_facture: str = _s("email_facture", True)
    fax_facture: str = _s("fax_facture", True)
    pic_facture: str = _s("pic_facture", True)
    item_address: str = _s("item_address", True)
    city_item: str = _s("city_item", True)
    zip_code_item: str = _s("zip_code_item", True)
    number_phone_item: str = _s("number_phone_item", True)
    email_item: str = _s("email_item", True)
    fax_item: str = _s("fax_item", True)
    pic_item: str = _s("pic_item", True)
    contact_person: str = _s("contact_person", True)
    tax_code_id: str = _s("tax_code_id", True)
    top: str = _s("top", True)
    handphone: str = _s("handphone", True)
    docktor_name: str = _s("docktor_name")
    kategori_divisi: str = _s("kategori_divisi")


@dataclass
class ResItemDetail(JsonModel):
    id: int = _i("id")
    kat: str = _s("kat")
    nama_barang: str = _s("nama_barang")
    quantity: str = _s("quantity")
    harga_satuan: str = _s("harga_satuan")
    discount: str = _s("discount")
    sub_total_item: str = _s("sub_total_item")
    rp_sub_total_item: str = _s("rp_sub_total_item")
    variable: str = _s("variable")
    kode: str = _s("kode")
    gudang: str = _s("gudang")


@dataclass
class ItemDeleted(JsonModel):
    id: int = _i("id")


@dataclass
class PerformanceInvoiceDetail(JsonModel):
    id: int = _i("id")
    customer_id: int = _i("customer_id")
    status: str = _s("status")
    divisi: str = _s("divisi")
    invoice_number: str = _s("invoice_number")
    po_number: str = _s("po_number")
    due_date: str = _s("due_date")
    doctor_name: str = _s("nama_dokter")
    patient_name: str = _s("nama_pasien")
    tanggal_tindakan: str = _s("tanggal_tindakan")
    rm: str = _s("rm")
    number_si: str = _s("number_si")
    nomor_sj: str = _s("nomor_surat_jalan")
    sub_total: str = _s("sub_total")
    sub_total_rp: str = _s("RP_sub_total")
    pajak: str = _s("pajak")
    pajak_ppn_rp: str = _s("RP_pajak_ppn")
    total: str = _s("total")
    total_rp: str = _s("RP_total")
    reason: str = _s("reason")
    tanggal: str = _s("tanggal")
    customer: str = _s("rumah_sakit")
    alamat_customer: str = _s("alamat")
    catatan: str = _s("catatan")
    preperad_by: str = _s("preperad_by")
    preperad_jabatan: str = _s("preperad_jabatan")
    approved_by: str = _s("approved_by")
    approve_jabatan: str = _s("approve_jabatan")
    item_deleted: list = _l("item_deleted", ItemDeleted)
    item_detail_pi: list = _l("item_detail_pi", ResItemDetail)


@dataclass
class Pemasukan(JsonModel):
    id: int = _i("id")
    nama: str = _s("nama")
    nominal: str = _s("nominal")
    amount: str = _s("amount")
    pajak: str = _s("pajak")
    tanggal: str = _s("tanggal")
    status: str = _s("status")


@dataclass
class Pengeluaran(JsonModel):
    id: int = _i("id")
    nama: str = _s("nama")
    nominal: str = _s("nominal")
    amount: str = _s("amount")
    pajak: str = _s("pajak")
    tanggal: str = _s("tanggal")
    status: str = _s("status")


@dataclass
class Price(JsonModel):
    id: int = _i("id")
    nama_rumah_sakit: str = _s("nama_Rumah_Sakit")
    kode: str = _s("kode")
    variable: str = _s("variable")
    nama: str = _s("nama")
    name: str = _s("name")
    diskon: int = _i("diskon")
    price: str = _s("price")
    added: str = _s("added")


@dataclass
class PriceSet(JsonModel):
    input: list = _l("input", Price)


@dataclass
class ItemPI(JsonModel):
    kode: str = _s("kode")
    kat: str = _s("kat")
    nama_barang: str = _s("nama_barang")
    quantity: str = _s("quantity")
    harga_satuan: str = _s("harga_satuan")
    discount: int = _i("discount")
    variable: str = _s("variable")
    amount: str = _s("amount")
    gudang: str = _s("gudang")
    price: str = _s("price")


@dataclass
class DeletedItem(JsonModel):
    kat: str = _s("kat")


@dataclass
class ProformaInvoice(JsonModel):
    id_divisi: str = _s("id_divisi")
    rumah_sakit: str = _s("rumah_sakit")
    alamat: str = _s("alamat")
    jatuh_tempo: str = _s("jatuh_tempo")
    nama_dokter: str = _s("nama_dokter")
    nama_pasien: str = _s("nama_pasien")
    rm: str = _s("rm")
    id_rumah_sakit: str = _s("id_rumah_sakit")
    tanggal_tindakan: str = _s("tanggal_tindakan")
    tanggal_pi: str = _s("tanggal")
    nomor_invoice: str = _s("nomor_invoice")
    nomor_si: str = _s("nomor_si")
    pajak: str = _s("pajak")
    subtotal: str = _s("subtotal")
    total: str = _s("total")
    rp_sub_total: str = _s("RP_sub_total")
    item: list = _l("item", ItemPI)
    item_deleted: list = _l("item_deleted", DeletedItem)


@dataclass
class ItemBuyer(JsonModel):
    """A row of the item_buyer table."""

    id: int = _i("id", True)
    po_id: int = _i("po_id", True)
    name: str = _s("name", True)
    quantity: str = _s("quantity", True)
    price: str = _s("price", True)
    price_rp: str = _s("price_rp", True)
    discount: str = _s("discount", True)
    amount: str = _s("amount", True)
    kode: str = _s("kode")
    variable: str = _s("variable")
    gudang: str = _s("gudang")


@dataclass
class ItemBuyer2(JsonModel):
    id: int = _i("id", True)
    po_id: int = _i("po_id", True)
    name: str = _s("name", True)
    quantity: str = _s("quantity", True)
    price: str = _s("price", True)
    price_rp: str = _s("price_rp", True)
    discount: str = _s("discount", True)
    amount: str = _s("amount", True)


@dataclass
class PurchaseOrder(JsonModel):
    id: int = _i("id", True)
    nama_suplier: str = _s("nama_suplier", True)
    nomor_po: str = _s("nomor_po", True)
    nomor_si: str = _s("nomor_si", True)
    tanggal: str = _s("tanggal", True)
    catatan_po: str = _s("catatan_po", True)
    prepared_by: str = _s("prepared_by", True)
    prepared_jabatan: str = _s("prepared_jabatan", True)
    approved_by: str = _s("approved_by", True)
    approved_jabatan: str = _s("approved_jabatan", True)
    sub_total: str = _s("sub_total", True)
    pajak: str = _s("pajak", True)
    total: str = _s("total", True)
    sub_total_rp: str = _s("sub_total_rp", True)
    pajak_rp: str = _s("pajak_rp", True)
    total_rp: str = _s("total_rp", True)
    created_at: str = _s("created_at", True)
    created_by: str = _s("created_by", True)
    updated_at: str = _s("updated_at", True)
    updated_by: str = _s("updated_by", True)
    massage: str = _s("message", True)
    status: str = _s("status", True)
    item: list = _l("item", ItemBuyer, True)
    item_deleted: list = _l("item_deleted", ItemBuyer2, True)
    reason: str = _s("reason", True)


@dataclass
class Item(JsonModel):
    id: int = _i("id")
    po_id: int = _i("po_id")
    name: str = _s("name")
    quantity: str = _s("quantity")
    price: str = _s("price")
    variable: str = _s("variable")
    kode: str = _s("kode")
    gudang: str = _s("gudang")
    amount: str = _s("amount")


@dataclass
class PurchaseOrder2(JsonModel):
    id: int = _i("id")
    nama_suplier: str = _s("nama_suplier")
    catatan_po: str = _s("catatan_po")
    prepared_by: str = _s("prepared_by")
    prepared_jabatan: str = _s("prepared_jabatan")
    approved_by: str = _s("approved_by")
    approved_jabatan: str = _s("approved_jabatan")
    status: str = _s("status")
    subtotal: str = _s("sub_total")
    pajak: str = _s("pajak")
    total: str = _s("total")
    tanggal: str = _s("tanggal")
    nomor_po: str = _s("nomor_po")
    nomor_si: str = _s("nomor_si")
    item: list = _l("item", Item)
    item_deleted: list = _l("item_deleted", ItemDeleted)
    reason: str = _s("reason")


@dataclass
class Stock(JsonModel):
    id: int = _i("id")
    variable: str = _s("variable")
    nama: str = _s("nama")
    qty: int = _i("qty")
    harga: str = _s("harga")
    kode: str = _s("kode")
    nama_gudang: str = _s("namaGudang", True)
    name: str = _s("name")
    price: str = _s("price")


@dataclass
class Gudang(JsonModel):
    id: int = _i("id")
    nama: str = _s("nama_gudang")
    lokasi: str = _s("alamat_gudang")