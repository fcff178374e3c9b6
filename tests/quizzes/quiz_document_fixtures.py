from __future__ import annotations

SAMPLE_DOCUMENT = """ĐỀ THI THỬ
### **Đề cương Toán lớp 1**
Thời gian: 15 phút

**Câu 1: 2+2=?**
A. 3
B. 4
C. 5
D. 6
**Đáp án đúng: B**

**Câu 2 (Ứng dụng): Thủ đô của Việt Nam là gì?**
A. Hà Nội
B. Huế
C. Đà Nẵng
**Đáp án đúng: D**

**Câu 3 (Ứng dụng): Chọn số chẵn**
A.1
B.  2
Ghi chú: chọn một đáp án
C. 3
**Đáp án đúng: B**
"""


def block(
    number: int,
    prompt: str,
    options: list[tuple[str, str]],
    answer: str,
) -> str:
    option_lines = "\n".join(f"{label}. {content}" for label, content in options)
    return f"**Câu {number}: {prompt}**\n{option_lines}\n**Đáp án đúng: {answer}**\n"


ABCD = [("A", "3"), ("B", "4"), ("C", "5"), ("D", "6")]
