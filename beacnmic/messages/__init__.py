"""Typed getter and setter messages for each Beacn DSP block and device setting."""