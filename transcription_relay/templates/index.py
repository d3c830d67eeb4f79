INDEX_PAGE = """
<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>Speech to Text</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
  </head>
  <body>
    <h1>Speech to Text</h1>

    <section>
      <button id="recordBtn">Start Recording</button>
      <button id="stopBtn" disabled>Stop</button>
      <span id="statusText">Ready to record</span>
      <span id="bars"><i></i><i></i><i></i><i></i><i></i></span>
    </section>

    <section>
      <div id="uploadArea">Drop an audio file here or click to choose</div>
      <input type="file" id="fileInput" accept="audio/*" hidden />
    </section>

    <div id="processing" hidden>Processing...</div>

    <section>
      <div id="result"><p class="placeholder">Your transcription will appear here...</p></div>
      <dl id="meta" hidden>
        <dt>Confidence</dt><dd id="confidence"></dd>
        <dt>Words</dt><dd id="wordCount"></dd>
        <dt>Duration</dt><dd id="duration"></dd>
        <dt>Model</dt><dd id="model"></dd>
      </dl>
      <button id="copyBtn" disabled>Copy</button>
      <button id="downloadBtn" disabled>Download</button>
      <button id="clearBtn" disabled>Clear</button>
    </section>

    <div id="status"></div>

    <script>
      const $ = (id) => document.getElementById(id);
      const PLACEHOLDER = '<p class="placeholder">Your transcription will appear here...</p>';
      const session = { recorder: null, chunks: [], capturing: false, audioContext: null, result: null };

      function status(message) {
        const line = document.createElement("div");
        line.textContent = message;
        $("status").appendChild(line);
        setTimeout(() => line.remove(), 5000);
      }

      async function checkMicrophone() {
        try {
          const stream = await navigator.mediaDevices.getUserMedia({ audio: true });
          stream.getTracks().forEach((t) => t.stop());
          status("Microphone access granted");
        } catch (e) {
          status("Microphone access denied. File upload is still available.");
          $("recordBtn").disabled = true;
        }
      }

      async function startCapture() {
        if (session.capturing) { status("Already recording"); return; }
        let stream;
        try {
          stream = await navigator.mediaDevices.getUserMedia({ audio: true });
        } catch (e) {
          status("Failed to start recording: " + e.message);
          $("recordBtn").disabled = true;
          return;
        }
        session.chunks = [];
        session.recorder = new MediaRecorder(stream);
        session.recorder.ondataavailable = (e) => { if (e.data.size > 0) session.chunks.push(e.data); };
        session.recorder.onstop = () => {
          stream.getTracks().forEach((t) => t.stop());
          const name = "recording-" + Date.now() + ".webm";
          submit(new File(session.chunks, name, { type: "audio/webm" }));
        };
        session.recorder.start(1000);
        session.capturing = true;
        $("recordBtn").disabled = true;
        $("stopBtn").disabled = false;
        $("statusText").textContent = "Recording...";
        visualize(stream);
      }

      function stopCapture() {
        if (!session.capturing) return;
        session.capturing = false;
        session.recorder.stop();
        if (session.audioContext) { session.audioContext.close(); session.audioContext = null; }
        $("recordBtn").disabled = false;
        $("stopBtn").disabled = true;
        $("statusText").textContent = "Ready to record";
      }

      function visualize(stream) {
        session.audioContext = new AudioContext();
        const analyser = session.audioContext.createAnalyser();
        analyser.fftSize = 256;
        session.audioContext.createMediaStreamSource(stream).connect(analyser);
        const data = new Uint8Array(analyser.frequencyBinCount);
        const bars = document.querySelectorAll("#bars i");
        const frame = () => {
          if (!session.capturing) return;
          analyser.getByteFrequencyData(data);
          bars.forEach((bar, i) => { bar.textContent = "|".repeat(Math.max(10, (data[i * 10] || 0) / 255 * 30) / 10); });
          requestAnimationFrame(frame);
        };
        frame();
      }

      function acceptFile(file) {
        if (!file) return;
        if (!file.type.startsWith("audio/")) { status("Please upload an audio file"); return; }
        submit(file);
      }

      async function submit(file) {
        $("processing").hidden = false;
        try {
          const body = new FormData();
          body.append("audio", file);
          const response = await fetch("/api/transcribe", { method: "POST", body });
          const result = await response.json();
          if (!result.success) throw new Error(result.message || "Transcription failed");
          render(result);
          status("Transcription completed successfully!");
        } catch (e) {
          status("Transcription failed: " + e.message);
        } finally {
          $("processing").hidden = true;
        }
      }

      function render(result) {
        const p = document.createElement("p");
        p.textContent = result.transcript || "No speech detected in the audio.";
        $("result").replaceChildren(p);
        $("confidence").textContent = Math.round(result.confidence * 100) + "%";
        $("wordCount").textContent = result.word_count;
        $("duration").textContent = result.duration.toFixed(1) + "s";
        $("model").textContent = result.metadata.model;
        $("meta").hidden = false;
        ["copyBtn", "downloadBtn", "clearBtn"].forEach((id) => { $(id).disabled = false; });
        session.result = result;
      }

      function clearResult() {
        $("result").innerHTML = PLACEHOLDER;
        $("meta").hidden = true;
        ["copyBtn", "downloadBtn", "clearBtn"].forEach((id) => { $(id).disabled = true; });
        session.result = null;
        status("Transcription cleared");
      }

      function download() {
        const r = session.result;
        if (!r) return;
        const text = "Speech to Text Transcription\\n" +
          "Generated: " + new Date().toLocaleString() + "\\n" +
          "Model: " + r.metadata.model + "\\n" +
          "Confidence: " + Math.round(r.confidence * 100) + "%\\n" +
          "Duration: " + r.duration.toFixed(1) + "s\\n" +
          "Word Count: " + r.word_count + "\\n\\n" +
          "Transcript:\\n" + r.transcript;
        const a = document.createElement("a");
        a.href = URL.createObjectURL(new Blob([text], { type: "text/plain" }));
        a.download = "transcription-" + Date.now() + ".txt";
        a.click();
        URL.revokeObjectURL(a.href);
        status("Transcription downloaded!");
      }

      $("recordBtn").onclick = startCapture;
      $("stopBtn").onclick = stopCapture;
      $("uploadArea").onclick = () => $("fileInput").click();
      $("fileInput").onchange = (e) => acceptFile(e.target.files[0]);
      $("uploadArea").ondragover = (e) => e.preventDefault();
      $("uploadArea").ondrop = (e) => { e.preventDefault(); acceptFile(e.dataTransfer.files[0]); };
      $("copyBtn").onclick = () => session.result && navigator.clipboard.writeText(session.result.transcript)
        .then(() => status("Transcription copied to clipboard!"), () => status("Failed to copy transcription"));
      $("downloadBtn").onclick = download;
      $("clearBtn").onclick = clearResult;
      checkMicrophone();
    </script>
  </body>
</html>
"""
