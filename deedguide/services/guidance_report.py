"""Plain-text guidance sheet.

Renders the declared facts and the numbered guidance results as the sheet
handed to the client at the counter. Narratives are embedded verbatim.
"""

from __future__ import annotations

from typing import Iterable

from deedguide.core.temporal import calendar_age, format_date
from deedguide.domain.enums import (
    MortgageStatus,
    PriorMarriageEnd,
    PropertyOrigin,
    TransactionType,
    honorific_label,
)
from deedguide.domain.facts import Owner, TransactionContext

RULE = '-' * 50

TRANSACTION_LABELS = {
    TransactionType.GIFT: 'Tặng cho',
    TransactionType.SALE_OR_OTHER: 'Bán/Chuyển nhượng/Góp vốn/Thế chấp',
}

ORIGIN_LABELS = {
    PropertyOrigin.TRANSFER: 'Mua/Nhận chuyển nhượng',
    PropertyOrigin.GIFT_OR_INHERITANCE: 'Được tặng cho/Thừa kế',
    PropertyOrigin.STATE_RECOGNITION: 'Trực tiếp được Nhà nước công nhận',
}

MORTGAGE_LABELS = {
    MortgageStatus.MORTGAGED: 'Đang thế chấp',
    MortgageStatus.RELEASED: 'Đã giải chấp',
    MortgageStatus.NEVER: 'Không',
}


def build_guidance_report(
    context: TransactionContext,
    results: Iterable[str],
    *,
    office_name: str,
    version: str,
) -> str:
    lines = [
        office_name,
        'PHIẾU HƯỚNG DẪN HỒ SƠ BAN ĐẦU (CÁ NHÂN)',
        '',
        f'Ngày hướng dẫn: {format_date(context.guidance_date)}',
        RULE,
        'I. THÔNG TIN KÊ KHAI',
        RULE,
        f'1. Loại giao dịch: {TRANSACTION_LABELS.get(context.transaction_type, "")}',
        f'2. Giấy chứng nhận: {"Đã có" if context.has_certificate else "Chưa có"}',
    ]

    if context.has_certificate:
        lines.extend([
            f'3. Nguồn gốc tài sản: {ORIGIN_LABELS.get(context.property_origin, "")}',
            f'4. Ngày sở hữu: {format_date(context.acquisition_date)}',
            f'5. Thế chấp: {MORTGAGE_LABELS.get(context.mortgage_status, "")}',
            '',
            f'6. Danh sách chủ sở hữu ({len(context.owners)} người):',
        ])
        for position, owner in enumerate(context.owners, start=1):
            lines.extend(_owner_lines(position, owner, context))

    lines.extend(['', RULE, 'II. KẾT QUẢ HƯỚNG DẪN', RULE, ''])

    results = list(results)
    if not results:
        lines.append('Không có hướng dẫn cụ thể.')
    for index, narrative in enumerate(results, start=1):
        lines.extend([f'[MỤC {index}]', narrative, ''])

    lines.extend([
        RULE,
        '[GHI CHÚ QUAN TRỌNG]',
        'Nội dung hướng dẫn nêu trên chỉ mang TÍNH CHẤT THAM KHẢO dựa trên dữ liệu Quý khách cung cấp.',
        'Quý khách vui lòng liên hệ trực tiếp cán bộ nghiệp vụ để được hướng dẫn chi tiết.',
        f'PHIÊN BẢN HƯỚNG DẪN HỒ SƠ CÔNG CHỨNG CỦA {office_name} - PHIÊN BẢN {version}.',
    ])
    return '\n'.join(lines) + '\n'


def _owner_lines(position: int, owner: Owner, context: TransactionContext) -> list[str]:
    age = calendar_age(owner.birth_date, context.guidance_date)
    lines = [
        f'  - CSH {position}: {honorific_label(owner.honorific)} {owner.name} '
        f'(Sinh: {format_date(owner.birth_date)}, {age} tuổi)',
    ]

    single, married = owner.single, owner.married
    if single is not None:
        lines.append('    + Tình trạng: Độc thân')
        if single.is_never_married:
            lines.append('    + Chi tiết: Chưa kết hôn lần nào')
        elif single.is_divorced:
            lines.append('    + Chi tiết: Đã ly hôn')
            if single.divorce_date:
                lines.append(f'    + Ngày ly hôn: {format_date(single.divorce_date)}')
            if single.ex_spouse_name:
                lines.append(
                    f'    + Vợ/chồng cũ (Ly hôn): {honorific_label(single.ex_spouse_honorific)} {single.ex_spouse_name}'
                )
        elif single.is_widowed:
            lines.append('    + Chi tiết: Vợ/chồng đã chết')
            if single.spouse_death_date:
                lines.append(f'    + Ngày vợ/chồng chết: {format_date(single.spouse_death_date)}')
            if single.ex_spouse_name:
                lines.append(
                    f'    + Vợ/chồng cũ (Đã mất): {honorific_label(single.ex_spouse_honorific)} {single.ex_spouse_name}'
                )

    elif married is not None:
        lines.extend([
            '    + Tình trạng: Đang có vợ/chồng',
            f'    + Ngày ĐK kết hôn: {format_date(married.marriage_date)}',
            f'    + Vợ/chồng hiện tại: {honorific_label(married.spouse_honorific)} {married.spouse_name or "N/A"}',
            f'    + Loại kết hôn: {"Lần đầu" if married.is_first_marriage else "Không phải lần đầu"}',
        ])
        if married.is_remarriage and married.prior_end_reason:
            if married.prior_end_reason == PriorMarriageEnd.DIVORCE:
                lines.append('    + Lý do chấm dứt lần trước: Ly hôn')
                date_label = 'Ngày ly hôn trước'
            else:
                lines.append('    + Lý do chấm dứt lần trước: Vợ/chồng chết')
                date_label = 'Ngày vợ/chồng trước chết'
            if married.prior_end_date:
                lines.append(f'    + {date_label}: {format_date(married.prior_end_date)}')
            if married.prior_spouse_name:
                lines.append(
                    f'    + Vợ/chồng trước: {honorific_label(married.prior_spouse_honorific)} {married.prior_spouse_name}'
                )

    else:
        lines.append('    + Tình trạng: Chưa khai báo')

    return lines
