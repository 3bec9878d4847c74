"""Narrative wording for guidance outcomes.

Each renderer returns the plain-text block shown to the client and embedded
verbatim in the printed guidance sheet: a bracketed tag line, `•` bullets,
`→` document lists and `DD/MM/YYYY` dates.
"""

from __future__ import annotations

from deedguide.domain.enums import honorific_label
from deedguide.domain.facts import Owner, TransactionContext

from .temporal import exact_age, format_date

INDENT = '    '

CERTIFICATE = 'GCN QSDĐ/QSHN'
MARITAL_CERT_VALIDITY = (
    '* Giấy xác nhận TTHN phải còn hạn sử dụng 06 tháng',
    '  tính đến ngày nộp hồ sơ.',
)


def _block(title: str, *lines: str) -> str:
    return '\n'.join([title, *(INDENT + line if line else '' for line in lines)])


def _party(honorific: str | None, name: str) -> str:
    return f'{honorific_label(honorific)} {name}'.rstrip()


def _owner(owner: Owner) -> str:
    return _party(owner.honorific, owner.name)


# -- Minors ------------------------------------------------------------------

def gift_by_minor_message(owner: Owner, context: TransactionContext) -> str:
    return _block(
        f'[DƯỚI 18 TUỔI- CHO TÀI SẢN] Trẻ {owner.name}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        '• KHÔNG THỂ TẶNG CHO TÀI SẢN CỦA CON DƯỚI 18 TUỔI.',
    )


def under_9_message(owner: Owner, context: TransactionContext) -> str:
    child = owner.name
    return _block(
        f'[DƯỚI 9 TUỔI] Trẻ {child}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        f'• Người ký văn bản: Cha & Mẹ của trẻ {child}.',
        '→ Hồ sơ xuất trình bản chính:',
        f'    - CCCD của Cha & Mẹ trẻ {child};',
        f'    - Giấy Khai sinh trẻ {child};',
        f'    - {CERTIFICATE}.',
    )


def age_9_to_15_message(owner: Owner, context: TransactionContext) -> str:
    child = owner.name
    age = exact_age(owner.birth_date, context.guidance_date)
    return _block(
        f'[{age} tuổi] Trẻ {child}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        f'• Người ký văn bản: Cha & Mẹ của trẻ {child}.',
        '→ Phải xuất trình bản chính:',
        f'    - CCCD của Cha & Mẹ trẻ {child};',
        f'    - Giấy Khai sinh trẻ {child};',
        f'    - Văn bản đồng ý của trẻ {child} (chứng nội dung)',
        f'      HOẶC CCCD của trẻ {child} (ký chung);',
        f'    - {CERTIFICATE}.',
    )


def age_15_to_18_message(owner: Owner, context: TransactionContext) -> str:
    child = owner.name
    age = exact_age(owner.birth_date, context.guidance_date)
    return _block(
        f'[{age} tuổi] Trẻ {child}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        f'• Người ký văn bản: trẻ {child}.',
        '→ Phải xuất trình bản chính:',
        f'    - CCCD của trẻ {child};',
        f'    - Giấy Khai sinh trẻ {child};',
        '    - CCCD của Cha & Mẹ (ký chung)',
        '      HOẶC Văn bản đồng ý của Cha & Mẹ (chứng nội dung);',
        f'    - {CERTIFICATE}.',
    )


# -- Adults: separate property -------------------------------------------------

def never_married_or_gifted_message(owner: Owner, context: TransactionContext) -> str:
    who = _owner(owner)
    return _block(
        f'[ĐỘC THÂN//CHƯA_KH//GỐC TẶNG CHO//THỪA KẾ] {who}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        f'• Người ký văn bản: {who}.',
        '→ Phải xuất trình bản chính:',
        f'    - CCCD của {who};',
        f'    - {CERTIFICATE}.',
        'Ghi chú:',
        '(1) Trường hợp tài sản có nguồn gốc thừa kế/nhận tặng cho, CẦN xuất trình:',
        '    * Văn bản tặng cho/Văn bản thừa kế.',
        '(2) Trường hợp khác, CẦN xuất trình:',
        '    * Giấy xác nhận TTHN phải xác nhận đầy đủ thời gian',
        f'      từ khi {who} đủ tuổi kết hôn đến nay (là chưa kết hôn);',
        *('    ' + line for line in MARITAL_CERT_VALIDITY),
    )


def _marital_certificate_since(owner: Owner, tag: str, period: str) -> str:
    who = _owner(owner)
    return _block(
        f'[{tag}] {who}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        f'• Người ký văn bản: {who}.',
        '→ Phải xuất trình bản chính:',
        f'    - CCCD của {who};',
        f'    - Giấy xác nhận tình trạng hôn nhân của {who};',
        f'    - {CERTIFICATE}.',
        'Ghi chú:',
        '* Giấy xác nhận TTHN phải xác nhận đầy đủ thời gian',
        f'  {period};',
        *MARITAL_CERT_VALIDITY,
    )


def divorced_before_acquisition_message(owner: Owner, context: TransactionContext) -> str:
    divorced_on = format_date(owner.single.divorce_date)
    return _marital_certificate_since(
        owner, 'ĐỘC THÂN//LH→SH', f'từ ngày ly hôn (ngày {divorced_on}) đến nay (là chưa kết hôn lại)'
    )


def widowed_before_acquisition_message(owner: Owner, context: TransactionContext) -> str:
    died_on = format_date(owner.single.spouse_death_date)
    return _marital_certificate_since(
        owner, 'ĐỘC THÂN//DIE→SH', f'từ ngày vợ/chồng cũ chết (ngày {died_on}) đến nay'
    )


def acquired_before_first_marriage_message(owner: Owner, context: TransactionContext) -> str:
    who = _owner(owner)
    married_on = format_date(owner.married.marriage_date)
    return _block(
        f'[1_KẾT HÔN//SH→KH] {who}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        f'• Người ký văn bản: {who}.',
        '→ Phải xuất trình bản chính:',
        f'    - CCCD của {who};',
        f'    - Giấy xác nhận tình trạng hôn nhân của {who} cho giai đoạn trước khi kết hôn;',
        '    - Giấy chứng nhận đăng ký kết hôn;',
        f'    - {CERTIFICATE}.',
        'Ghi chú:',
        '* Giấy xác nhận TTHN phải xác nhận đủ thời gian',
        f'  từ khi {who} đủ tuổi kết hôn đến ngày kết hôn (ngày {married_on});',
        *MARITAL_CERT_VALIDITY,
    )


def _between_marriages(owner: Owner, tag: str, since: str) -> str:
    who = _owner(owner)
    married_on = format_date(owner.married.marriage_date)
    period = f'cho giai đoạn {since} cho đến ngày kết hôn lại (ngày {married_on})'
    return _block(
        f'[{tag}] {who}:',
        '• Tính chất: TÀI SẢN RIÊNG.',
        f'• Người ký văn bản: {who}.',
        '→ Phải xuất trình bản chính:',
        f'    - CCCD của {who};',
        f'    - Giấy xác nhận tình trạng hôn nhân của {who}',
        f'      {period};',
        '    - Giấy chứng nhận đăng ký kết hôn;',
        f'    - {CERTIFICATE}.',
        'Ghi chú:',
        '* Giấy xác nhận TTHN phải xác nhận đủ thời gian',
        f'  {period};',
        *MARITAL_CERT_VALIDITY,
    )


def acquired_between_divorce_and_remarriage_message(owner: Owner, context: TransactionContext) -> str:
    divorced_on = format_date(owner.married.prior_end_date)
    return _between_marriages(
        owner, '2_KẾT HÔN//LY→SH→KH', f'từ khi ly hôn (ngày {divorced_on})'
    )


def acquired_between_death_and_remarriage_message(owner: Owner, context: TransactionContext) -> str:
    died_on = format_date(owner.married.prior_end_date)
    return _between_marriages(
        owner, '2_KẾT HÔN//DIE→SH→KH', f'từ khi vợ/chồng chết (ngày {died_on})'
    )


# -- Adults: joint property ----------------------------------------------------

def _joint_with(owner: Owner, tag: str, partner: str, marriage_doc: str, notes: tuple[str, ...] = ()) -> str:
    who = _owner(owner)
    lines = [
        f'• Tính chất: TÀI SẢN CHUNG với {partner}.',
        f'• Người ký văn bản: {who}.',
        f'• Người ký cùng: {partner}.',
        '→ Phải xuất trình bản chính:',
        f'    - CCCD của {who};',
        f'    - CCCD của {partner};',
        f'    - {marriage_doc};',
        f'    - {CERTIFICATE}.',
    ]
    if notes:
        lines.append('Ghi chú:')
        lines.extend(notes)
    return _block(f'[{tag}] {who}:', *lines)


DIVORCE_JUDGMENT_NOTES = (
    'Ông/bà vui lòng liên hệ trực tiếp để được hướng dẫn cụ thể nếu:',
    '(1) Bản án ly hôn ĐÃ CHIA tài sản này',
    '    HOẶC tài sản được tạo lập TRƯỚC thời kỳ hôn nhân;',
    '(2) Bản án ly hôn không ghi rõ thời điểm kết hôn của hôn nhân ban đầu,',
    '    có thể cần bổ sung trích lục kết hôn cũ.',
)


def acquired_before_divorce_message(owner: Owner, context: TransactionContext) -> str:
    single = owner.single
    partner = _party(single.ex_spouse_honorific, single.ex_spouse_name)
    return _joint_with(owner, 'ĐỘC THÂN//SH→LH', partner, 'Bản án ly hôn', DIVORCE_JUDGMENT_NOTES)


def married_before_acquisition_message(owner: Owner, context: TransactionContext) -> str:
    married = owner.married
    partner = _party(married.spouse_honorific, married.spouse_name)
    return _joint_with(owner, '1&2_KẾT HÔN//KH→SH', partner, 'Giấy chứng nhận đăng ký kết hôn')


def acquired_before_prior_divorce_message(owner: Owner, context: TransactionContext) -> str:
    married = owner.married
    partner = _party(married.prior_spouse_honorific, married.prior_spouse_name)
    return _joint_with(owner, '2_KẾT HÔN//SH→LY→KH', partner, 'Bản án ly hôn', DIVORCE_JUDGMENT_NOTES)


# -- Adults: estate of a deceased spouse ---------------------------------------

def _inheritance_pending(owner: Owner, tag: str, deceased: str) -> str:
    who = _owner(owner)
    return _block(
        f'[{tag}] {who}:',
        f'• Tính chất: CÓ KHẢ NĂNG LÀ TÀI SẢN CHUNG với {deceased}.',
        f'  Do {deceased} đã chết,',
        f'→ Phải thực hiện phân chia di sản thừa kế của {deceased}.',
        '→ Sau khi phân chia di sản và đăng ký thay đổi chủ sở hữu,',
        f'  {who} sẽ ký chung với những người thừa kế (nếu có).',
        'Ghi chú:',
        'Ông/bà vui lòng liên hệ trực tiếp để được hướng dẫn chi tiết,',
        'đồng thời xuất trình:',
        f'    - Giấy chứng nhận kết hôn với {deceased};',
        f'    - Giấy chứng tử của {deceased}.',
    )


def acquired_before_spouse_death_message(owner: Owner, context: TransactionContext) -> str:
    single = owner.single
    deceased = _party(single.ex_spouse_honorific, single.ex_spouse_name)
    return _inheritance_pending(owner, 'ĐỘC THÂN//SH→DIE', deceased)


def acquired_before_prior_spouse_death_message(owner: Owner, context: TransactionContext) -> str:
    married = owner.married
    deceased = _party(married.prior_spouse_honorific, married.prior_spouse_name)
    return _inheritance_pending(owner, '2_KẾT HÔN//SH→DIE→KH', deceased)


# -- Fallback and household flags ----------------------------------------------

def no_applicable_rule_message(owner: Owner, context: TransactionContext) -> str:
    return _block(
        f'[CẢNH BÁO] Không tìm thấy kịch bản phù hợp cho {_owner(owner)}.',
        'Vui lòng kiểm tra lại ngày tháng năm sinh hoặc ngày sở hữu tài sản',
        'so với các mốc sự kiện (kết hôn, ly hôn, vợ/chồng chết).',
    )


def mortgage_release_message() -> str:
    return _block(
        '[PL#_1: GIAICHAP]',
        '• Cần bổ sung Văn bản giải chấp của bên nhận thế chấp.',
        '→ Liên hệ với Ngân hàng để có Văn bản giải chấp (sau khi trả hết nợ).',
    )


def secured_transaction_message() -> str:
    return _block(
        '[PL#_2: XOA_GDBĐ]',
        '• CÓ THỂ theo yêu cầu của một số Văn phòng đăng ký đất đai',
        '  thì PHẢI TIẾN HÀNH XOÁ ĐĂNG KÝ GIAO DỊCH BẢO ĐẢM',
        '  MỚI ĐƯỢC THỰC HIỆN GIAO DỊCH.',
        f'→ Liên hệ với VPĐK ĐẤT ĐAI để xoá đăng ký GDBĐ trên {CERTIFICATE}.',
    )


def tax_debt_message() -> str:
    return _block(
        '[PL#_3: NO_TSDĐ]',
        '• Hiện tại CHƯA THỂ thực hiện được giao dịch.',
        '  Lý do: vẫn còn đang nợ nghĩa vụ tài chính.',
        '→ Liên hệ với Cơ quan thuế để hoàn tất nghĩa vụ tài chính;',
        f'→ Liên hệ với VPĐK ĐẤT ĐAI để đăng ký xoá ghi nợ trên {CERTIFICATE}.',
    )


NOT_ELIGIBLE_MESSAGE = '[Hướng dẫn]: HS KHÔNG ĐỦ ĐIỀU KIỆN ĐỂ CÔNG CHỨNG'
