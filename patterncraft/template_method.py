"""Template method: fingerprint modules share one processing outline."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FingerprintModule(ABC):
    """Fixes the order of steps; subclasses fill in the details."""

    def __init__(self) -> None:
        self.steps: list[str] = []

    def _report(self, message: str) -> str:
        print(message)
        self.steps.append(message)
        return message

    def get_image(self) -> str:
        return self._report("采指纹图像")

    def output(self) -> str:
        return self._report("指纹图像处理完成!")

    @abstractmethod
    def is_safe_mode(self) -> bool:
        """Report whether images are encrypted on the way."""

    @abstractmethod
    def process_image(self) -> str:
        """Process the captured image."""

    @abstractmethod
    def encrypt(self) -> str:
        """Encrypt the image."""

    @abstractmethod
    def decrypt(self) -> str:
        """Decrypt the image."""

    def algorithm(self) -> list[str]:
        """Run every step in order; return the steps taken."""
        self.get_image()
        if self.is_safe_mode():
            self.encrypt()
            self.decrypt()
        self.process_image()
        self.output()
        return self.steps


class FingerprintModuleA(FingerprintModule):
    def process_image(self) -> str:
        return self._report("使用 第一代版本算法 处理指纹图像")

    def is_safe_mode(self) -> bool:
        print("安全模式")
        return True

    def encrypt(self) -> str:
        return self._report("使用RSA密钥加密")

    def decrypt(self) -> str:
        return self._report("使用RSA密钥解密")


class FingerprintModuleB(FingerprintModule):
    def process_image(self) -> str:
        return self._report("使用 第二代版本算法 处理指纹图像")

    def is_safe_mode(self) -> bool:
        print("非安全模式")
        return False

    def encrypt(self) -> str:
        """Non-safe modules leave the image as it is; nothing is printed."""
        step = "no encryption"
        self.steps.append(step)
        return step

    def decrypt(self) -> str:
        """Non-safe modules leave the image as it is; nothing is printed."""
        step = "no decryption"
        self.steps.append(step)
        return step


class FingerprintModuleC(FingerprintModule):
    def process_image(self) -> str:
        return self._report("使用 第一代版本算法 处理指纹图像")

    def is_safe_mode(self) -> bool:
        print("安全模式")
        return True

    def encrypt(self) -> str:
        return self._report("使用DH密钥加密")

    def decrypt(self) -> str:
        return self._report("使用DH密钥解密")


def main(argv: list[str] | None = None) -> int:
    for module_cls in (FingerprintModuleA, FingerprintModuleB, FingerprintModuleC):
        module_cls().algorithm()
    print("\n")
    return 0