"""
Quantum engine: a circuit of qubits measured after a Hadamard gate,
sampled on the Aer simulator.

Even qubits are prepared in |+> and read in the Z basis; odd qubits stay
in |0> and are read in the X basis. Both cases reduce to one H before
measurement, so every qubit yields an unbiased bit.

QuantumRandomSource turns those bits into the uniform floats the
password generator consumes.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .entropy import FLOAT_BITS, bits_to_unit_float, mix_bits
from .errors import RandomSourceError

logger = logging.getLogger(__name__)

DEFAULT_NUM_QUBITS = 20
DEFAULT_SHOTS = 8
DEFAULT_ENTROPY_ROUNDS = 2


class BitSource(Protocol):
    def get_raw_bits(self) -> List[int]:
        ...


class QuantumEngine:
    """
    Samples `num_qubits` bits per shot, `shots` shots per run.
    """

    def __init__(
        self, num_qubits: int = DEFAULT_NUM_QUBITS, shots: int = DEFAULT_SHOTS
    ) -> None:
        if num_qubits < 1 or shots < 1:
            raise ValueError(
                f"num_qubits and shots must be positive, got {num_qubits}, {shots}"
            )

        self.num_qubits = num_qubits
        self.shots = shots
        self.backend = AerSimulator()

        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and num_qubits > max_qubits:
            raise ValueError(
                f"num_qubits={num_qubits} exceeds backend limit ({max_qubits})"
            )

        self.measurement_basis = ["X" if i % 2 else "Z" for i in range(num_qubits)]
        self._circuit = transpile(self._build_circuit(), self.backend)

    def _build_circuit(self) -> QuantumCircuit:
        qubits = range(self.num_qubits)
        qc = QuantumCircuit(self.num_qubits, self.num_qubits)
        qc.h(qubits)
        qc.measure(qubits, qubits)
        return qc

    def get_raw_bits(self) -> List[int]:
        """
        Run the circuit and return num_qubits * shots bits, shot by shot,
        qubit 0 first within a shot.
        """
        result = self.backend.run(self._circuit, shots=self.shots, memory=True).result()

        bits: List[int] = []
        # Memory strings are ordered [q_(n-1) ... q_0].
        for shot in result.get_memory():
            bits.extend(int(b) for b in reversed(shot))
        return bits


class QuantumRandomSource:
    """
    Random source fed by a quantum bit source.

    Each batch of raw bits is hashed together with a running batch counter
    (`entropy_rounds` SHA-256 rounds, 0 to use the bits as measured) and
    consumed FLOAT_BITS at a time per random() call.
    """

    def __init__(
        self,
        engine: Optional[BitSource] = None,
        entropy_rounds: int = DEFAULT_ENTROPY_ROUNDS,
    ) -> None:
        self.engine = engine if engine is not None else QuantumEngine()
        self.entropy_rounds = entropy_rounds
        self.batches = 0
        self._buffer: List[int] = []

    def _refill(self) -> None:
        while len(self._buffer) < FLOAT_BITS:
            bits = self.engine.get_raw_bits()
            if not bits:
                raise RandomSourceError("Quantum bit source returned no bits")
            self.batches += 1
            salt = self.batches.to_bytes(8, "big")
            self._buffer.extend(mix_bits(bits, self.entropy_rounds, salt))
        logger.debug("Quantum bit buffer refilled to %d bits", len(self._buffer))

    def random(self) -> float:
        if len(self._buffer) < FLOAT_BITS:
            self._refill()
        chunk = self._buffer[:FLOAT_BITS]
        del self._buffer[:FLOAT_BITS]
        return bits_to_unit_float(chunk)
